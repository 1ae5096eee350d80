"""Gospel-vocabulary and prohibited-term scanning.

Every keyword is matched as a whole word (or whole phrase) on the same
normalized text the detector sees, and also in its accent-stripped form,
since uploaded titles and transcripts often drop the diacritics.
"""

from __future__ import annotations

from faithscan.languages.registry import LanguageRegistry
from faithscan.utils.text import TermMatcher


class KeywordScanner:
    """Answers whether text carries devotional or disallowed vocabulary."""

    def __init__(self, registry: LanguageRegistry):
        self.registry = registry
        self._gospel: list[tuple[str, TermMatcher]] = [
            (code, TermMatcher(registry.gospel_keywords(code).keywords))
            for code in registry.all_language_codes()
        ]
        self._prohibited = TermMatcher(registry.prohibited_terms().terms)

    def contains_gospel_keywords(self, text: str | None) -> bool:
        """True as soon as any language's gospel keyword is found."""
        if not isinstance(text, str):
            return False
        return any(matcher.matches(text) for _, matcher in self._gospel)

    def contains_prohibited_terms(self, text: str | None) -> bool:
        if not isinstance(text, str):
            return False
        return self._prohibited.matches(text)

    def gospel_matches(self, text: str | None) -> dict[str, list[str]]:
        """Matched gospel keywords per language code; languages without hits are left out."""
        if not isinstance(text, str):
            return {}
        found = {}
        for code, matcher in self._gospel:
            hits = matcher.find(text)
            if hits:
                found[code] = hits
        return found

    def prohibited_matches(self, text: str | None) -> list[str]:
        if not isinstance(text, str):
            return []
        return self._prohibited.find(text)
