"""Data models for the content moderation system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from faithscan.detection.models import DetectedLanguage
from faithscan.errors import InputError

# Closed flag vocabulary
FLAG_INAPPROPRIATE = "inappropriate_content"
FLAG_NON_GOSPEL = "non_gospel_content"
FLAG_INSUFFICIENT_TRANSCRIPT = "insufficient_transcript"
FLAG_INVALID_INPUT = "invalid_input"

FLAGS = frozenset(
    {FLAG_INAPPROPRIATE, FLAG_NON_GOSPEL, FLAG_INSUFFICIENT_TRANSCRIPT, FLAG_INVALID_INPUT}
)


class ContentType(Enum):
    """Kind of upload being moderated."""

    MUSIC = "music"
    VIDEOS = "videos"
    SERMON = "sermon"
    AUDIO = "audio"
    EBOOK = "ebook"
    DEVOTIONAL = "devotional"
    PODCAST = "podcast"
    LIVE = "live"
    OTHER = "other"  # Any type the upload flow adds later

    @classmethod
    def parse(cls, value: object) -> ContentType:
        """Coerce an enum member or its string value.

        Unrecognised strings map to OTHER.

        Raises:
            InputError: if *value* is missing, blank or not a string.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise InputError("content_type", "missing")
        if not isinstance(value, str):
            raise InputError("content_type", f"expected a string, got {type(value).__name__}")
        key = value.strip().lower()
        if not key:
            raise InputError("content_type", "missing")
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class ModerationRequest:
    """One upload's text to moderate.  Never persisted."""

    title: str
    content_type: ContentType
    transcript: str | None = None  # Empty when transcription failed
    description: str | None = None

    def __post_init__(self):
        # Plain strings such as "music" are accepted; blank ones stay for validate().
        if isinstance(self.content_type, str) and self.content_type.strip():
            object.__setattr__(self, "content_type", ContentType.parse(self.content_type))

    def validate(self) -> None:
        """Raise InputError when a field has the wrong type."""
        if not isinstance(self.title, str):
            raise InputError("title", f"expected a string, got {type(self.title).__name__}")
        for name in ("transcript", "description"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InputError(name, f"expected a string or null, got {type(value).__name__}")
        ContentType.parse(self.content_type)

    @classmethod
    def from_dict(cls, data: object) -> ModerationRequest:
        """Build a request from a decoded payload.

        Accepts both ``contentType`` and ``content_type``.  A missing title
        is an error; transcript and description may be absent or null.
        """
        if not isinstance(data, dict):
            raise InputError("<request>", f"expected a mapping, got {type(data).__name__}")
        if "title" not in data:
            raise InputError("title", "missing")

        content_type = data.get("contentType", data.get("content_type"))
        request = cls(
            title=data["title"],
            content_type=ContentType.parse(content_type),
            transcript=data.get("transcript"),
            description=data.get("description"),
        )
        request.validate()
        return request


@dataclass(frozen=True)
class ModerationResult:
    """Outcome of one moderation pass."""

    is_approved: bool
    confidence: float  # 0.0 - 1.0
    flags: tuple[str, ...] = field(default_factory=tuple)  # Drawn from FLAGS
    detected_language: DetectedLanguage | None = None
    reason: str = ""
    requires_review: bool = False

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def to_dict(self) -> dict:
        """Wire shape consumed by the upload pipeline."""
        return {
            "isApproved": self.is_approved,
            "confidence": self.confidence,
            "flags": list(self.flags),
            "detectedLanguage": (
                self.detected_language.to_dict() if self.detected_language else None
            ),
            "reason": self.reason,
            "requiresReview": self.requires_review,
        }
