"""Content moderation — approve or reject uploads as devotional content."""

from faithscan.moderation.engine import ModerationDecisionEngine
from faithscan.moderation.models import (
    FLAG_INAPPROPRIATE,
    FLAG_INSUFFICIENT_TRANSCRIPT,
    FLAG_INVALID_INPUT,
    FLAG_NON_GOSPEL,
    FLAGS,
    ContentType,
    ModerationRequest,
    ModerationResult,
)

__all__ = [
    "ModerationDecisionEngine",
    "FLAG_INAPPROPRIATE",
    "FLAG_INSUFFICIENT_TRANSCRIPT",
    "FLAG_INVALID_INPUT",
    "FLAG_NON_GOSPEL",
    "FLAGS",
    "ContentType",
    "ModerationRequest",
    "ModerationResult",
]
