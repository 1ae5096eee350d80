"""Exceptions raised by faithscan.

Messages name the offending field and say how to fix it.
"""

from __future__ import annotations


class FaithscanError(Exception):
    """Base exception for all faithscan errors."""


class InputError(FaithscanError):
    """A moderation request field is missing or has the wrong type."""

    def __init__(self, field: str, reason: str = ""):
        message = f"Invalid moderation request field '{field}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.field = field
        self.reason = reason


class RegistryError(FaithscanError):
    """The language data file is malformed."""

    def __init__(self, source: str, reason: str = ""):
        message = f"Invalid language registry data in {source}"
        if reason:
            message += f": {reason}"
        message += "\nFix: check the file against faithscan/data/languages.yaml"
        super().__init__(message)
        self.source = source
        self.reason = reason


class ConfigError(FaithscanError):
    """A settings file is malformed or holds an out-of-range value."""

    def __init__(self, key: str, reason: str = ""):
        message = f"Invalid setting '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.key = key
        self.reason = reason
