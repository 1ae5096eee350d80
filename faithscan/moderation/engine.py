"""Moderation decision engine.

Runs one fixed pass per request and always returns a ModerationResult:

1. Assemble text: the transcript when it is long enough, else title + description.
2. Prohibited-term gate: any hit rejects at once; devotional words cannot offset it.
3. Collect signals: gospel keywords and detected language.
4. Synthesize a confidence from fixed increments, clamped to [0, 1].
5. Decide: a gospel hit, or confidence above the threshold, approves.

Malformed requests never raise past ``moderate``; they come back rejected
with the ``invalid_input`` flag.  The upload flow can treat moderation as
a total function.
"""

from __future__ import annotations

import logging

from faithscan.config import Settings
from faithscan.detection.detector import LanguageDetector
from faithscan.errors import InputError
from faithscan.languages.registry import LanguageRegistry, default_registry
from faithscan.moderation.models import (
    FLAG_INAPPROPRIATE,
    FLAG_INSUFFICIENT_TRANSCRIPT,
    FLAG_INVALID_INPUT,
    FLAG_NON_GOSPEL,
    ModerationRequest,
    ModerationResult,
)
from faithscan.scanning.scanner import KeywordScanner

logger = logging.getLogger(__name__)


class ModerationDecisionEngine:
    """Folds detector and scanner output into an approve/reject decision."""

    def __init__(
        self,
        registry: LanguageRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        registry = registry or default_registry()
        settings = settings or Settings()
        self.settings = settings.moderation
        self.detector = LanguageDetector(registry, settings.detector)
        self.scanner = KeywordScanner(registry)

    # -- public API ----------------------------------------------------------

    def moderate(self, request: ModerationRequest) -> ModerationResult:
        """Moderate one request.  Never raises."""
        try:
            if not isinstance(request, ModerationRequest):
                raise InputError(
                    "<request>", f"expected ModerationRequest, got {type(request).__name__}"
                )
            request.validate()
            return self._decide(request)
        except InputError as e:
            logger.warning("Malformed moderation request: %s", e)
            return _invalid_input(str(e))
        except Exception:
            logger.exception("Moderation failed unexpectedly; returning the safe default")
            return _invalid_input("Moderation could not evaluate this request")

    def moderate_payload(self, payload: object) -> ModerationResult:
        """Moderate a loosely-typed mapping, e.g. a decoded JSON body."""
        try:
            request = ModerationRequest.from_dict(payload)
        except InputError as e:
            logger.warning("Malformed moderation payload: %s", e)
            return _invalid_input(str(e))
        return self.moderate(request)

    # -- decision pass -------------------------------------------------------

    def _decide(self, request: ModerationRequest) -> ModerationResult:
        s = self.settings
        text, used_transcript = self._assemble_text(request)
        trailing_flags = () if used_transcript else (FLAG_INSUFFICIENT_TRANSCRIPT,)

        if self.scanner.contains_prohibited_terms(text):
            result = ModerationResult(
                is_approved=False,
                confidence=_clamp(s.prohibited_confidence),
                flags=(FLAG_INAPPROPRIATE,) + trailing_flags,
                reason="Prohibited terms detected",
            )
            self._log(result)
            return result

        gospel_hit = self.scanner.contains_gospel_keywords(text)
        language = self.detector.detect(text)

        confidence = 0.0
        if gospel_hit:
            confidence += s.gospel_weight
        if not language.is_unknown:
            confidence += s.language_weight * language.confidence
        if used_transcript:
            confidence += s.transcript_weight
        # Explicit labelling counts even when the transcript is noisy.
        if self.scanner.contains_gospel_keywords(request.title):
            confidence += s.title_weight
        confidence = _clamp(confidence)

        if gospel_hit:
            result = ModerationResult(
                is_approved=True,
                confidence=confidence,
                flags=trailing_flags,
                detected_language=language,
                reason="Gospel keywords detected",
            )
        elif confidence > s.approval_threshold:
            result = ModerationResult(
                is_approved=True,
                confidence=confidence,
                flags=trailing_flags,
                detected_language=language,
                reason="Confidence above approval threshold",
            )
        else:
            result = ModerationResult(
                is_approved=False,
                confidence=confidence,
                flags=(FLAG_NON_GOSPEL,) + trailing_flags,
                detected_language=language,
                reason=(
                    "Nothing to evaluate: no transcript, title or description"
                    if not text
                    else "No gospel signal found"
                ),
                requires_review=True,
            )
        self._log(result)
        return result

    def _assemble_text(self, request: ModerationRequest) -> tuple[str, bool]:
        """Text to evaluate, and whether it is the transcript.

        Short musical clips legitimately have no spoken words, so a missing
        transcript falls back to the upload's own metadata.
        """
        transcript = (request.transcript or "").strip()
        if transcript and len(transcript) >= self.settings.min_transcript_chars:
            return transcript, True
        parts = (request.title.strip(), (request.description or "").strip())
        return " ".join(p for p in parts if p), False

    @staticmethod
    def _log(result: ModerationResult) -> None:
        language = result.detected_language.code if result.detected_language else "-"
        logger.debug(
            "Moderation decision: approved=%s confidence=%.3f flags=%s language=%s",
            result.is_approved,
            result.confidence,
            ",".join(result.flags) or "-",
            language,
        )


def _invalid_input(reason: str) -> ModerationResult:
    return ModerationResult(
        is_approved=False,
        confidence=0.0,
        flags=(FLAG_INVALID_INPUT,),
        reason=reason,
        requires_review=True,
    )


def _clamp(value: float) -> float:
    return round(max(0.0, min(1.0, value)), 4)
