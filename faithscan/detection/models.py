"""Language detection result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from faithscan.languages.models import UNKNOWN_CODE, UNKNOWN_NAME


@dataclass(frozen=True)
class DetectedLanguage:
    """The language a text was attributed to."""

    code: str  # Registry code or "unknown"
    name: str
    confidence: float = 0.0  # 0.0 - 1.0

    @classmethod
    def unknown(cls, confidence: float = 0.0) -> DetectedLanguage:
        return cls(code=UNKNOWN_CODE, name=UNKNOWN_NAME, confidence=confidence)

    @property
    def is_unknown(self) -> bool:
        return self.code == UNKNOWN_CODE

    def to_dict(self) -> dict:
        return {"code": self.code, "name": self.name, "confidence": self.confidence}


@dataclass(frozen=True)
class DetectionResult:
    """Best match plus the other languages that scored, best first."""

    language: DetectedLanguage
    alternatives: tuple[DetectedLanguage, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "detectedLanguage": self.language.to_dict(),
            "alternativeLanguages": [a.to_dict() for a in self.alternatives],
        }
