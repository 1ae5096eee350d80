"""faithscan — language detection and devotional-content moderation for uploads."""

__version__ = "0.3.0"
