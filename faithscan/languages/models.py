"""Language registry data models — signatures and keyword dictionaries."""

from __future__ import annotations

from dataclasses import dataclass, field

UNKNOWN_CODE = "unknown"
UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class LanguageSignature:
    """Detection signature of one supported language."""

    code: str  # Registry code, e.g. "YORUBA"
    name: str
    locales: tuple[str, ...] = ()  # Speech-to-text locales, e.g. ("yo-NG",)
    diacritic_markers: frozenset[str] = field(default_factory=frozenset)
    marker_words: frozenset[str] = field(default_factory=frozenset)  # Normalized

    @property
    def is_english(self) -> bool:
        return self.code == "ENGLISH"


@dataclass(frozen=True)
class GospelKeywordSet:
    """Curated devotional vocabulary for one language."""

    language_code: str
    keywords: frozenset[str] = field(default_factory=frozenset)  # Normalized

    def __len__(self) -> int:
        return len(self.keywords)


@dataclass(frozen=True)
class ProhibitedTermSet:
    """Flat, language-agnostic set of disallowed terms."""

    terms: frozenset[str] = field(default_factory=frozenset)  # Normalized

    def __len__(self) -> int:
        return len(self.terms)
