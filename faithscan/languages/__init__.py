"""Language registry — the static table of supported languages.

Holds each language's detection signature (marker words, diacritics,
speech locales) together with the per-language gospel vocabulary and the
flat prohibited-term list.
"""

from faithscan.languages.models import (
    UNKNOWN_CODE,
    UNKNOWN_NAME,
    GospelKeywordSet,
    LanguageSignature,
    ProhibitedTermSet,
)
from faithscan.languages.registry import (
    LanguageRegistry,
    default_registry,
    load_registry,
    registry_from_dict,
)

__all__ = [
    "UNKNOWN_CODE",
    "UNKNOWN_NAME",
    "GospelKeywordSet",
    "LanguageSignature",
    "ProhibitedTermSet",
    "LanguageRegistry",
    "default_registry",
    "load_registry",
    "registry_from_dict",
]
