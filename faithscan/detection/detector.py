"""Rule-based language detector.

Scores every registered language against the normalized text::

    score = marker_hits / token_count
            + (diacritic_hits / char_count) * diacritic_weight

A single diacritic character (ọ, ẹ, ị, ụ, ɗ ...) says more about the
language than a short word that may be shared across languages, so the
diacritic term carries the heavier weight.
"""

from __future__ import annotations

from faithscan.config import DetectorSettings
from faithscan.detection.models import DetectedLanguage, DetectionResult
from faithscan.languages.models import LanguageSignature
from faithscan.languages.registry import LanguageRegistry
from faithscan.utils.text import TermMatcher, tokenize


class LanguageDetector:
    """Attributes text to one registered language, or to "unknown"."""

    def __init__(
        self,
        registry: LanguageRegistry,
        settings: DetectorSettings | None = None,
    ):
        self.registry = registry
        self.settings = settings or DetectorSettings()
        self._matchers: list[tuple[LanguageSignature, TermMatcher]] = [
            (sig, TermMatcher(sig.marker_words)) for sig in registry.signatures()
        ]

    def detect(self, text: str | None) -> DetectedLanguage:
        """Best matching language for *text*.  Never raises."""
        return self.detect_all(text).language

    def detect_all(self, text: str | None) -> DetectionResult:
        """Best match plus every other language with a non-zero score."""
        tokens = tokenize(text) if isinstance(text, str) else []
        if not tokens or not self._matchers:
            return DetectionResult(language=DetectedLanguage.unknown())

        # sorted() is stable: equal scores keep registry order.
        ranked = sorted(self.scores(tokens), key=lambda item: -item[1])
        winner, score = self._select(ranked)

        if score < self.settings.min_confidence:
            language = DetectedLanguage.unknown(confidence=_clamp(score))
            winner = None
        else:
            language = DetectedLanguage(code=winner.code, name=winner.name, confidence=_clamp(score))

        alternatives = tuple(
            DetectedLanguage(code=sig.code, name=sig.name, confidence=_clamp(s))
            for sig, s in ranked
            if s > 0 and sig is not winner
        )
        return DetectionResult(language=language, alternatives=alternatives)

    def scores(self, tokens: list[str]) -> list[tuple[LanguageSignature, float]]:
        """Raw (unclamped) score per language, in registry order."""
        char_count = sum(len(t) for t in tokens)
        weight = self.settings.diacritic_weight
        results = []
        for sig, matcher in self._matchers:
            marker_hits = matcher.count(tokens)
            diacritic_hits = sum(1 for t in tokens for ch in t if ch in sig.diacritic_markers)
            score = marker_hits / len(tokens) + (diacritic_hits / char_count) * weight
            results.append((sig, score))
        return results

    def _select(
        self, ranked: list[tuple[LanguageSignature, float]]
    ) -> tuple[LanguageSignature, float]:
        best, best_score = ranked[0]
        if not best.is_english:
            return best, best_score
        # Code-switched text: a regional phrase inside English prose is the
        # more informative signal, so near-ties go to the regional language.
        for sig, score in ranked[1:]:
            if best_score - score > self.settings.tie_epsilon:
                break
            if not sig.is_english:
                return sig, score
        return best, best_score


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))
