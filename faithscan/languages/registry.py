"""Immutable registry of supported languages and their keyword dictionaries.

The registry is built once per process from a YAML data file (the bundled
``faithscan/data/languages.yaml`` unless another path is given) and handed
to the detector and scanner by reference.  Nothing mutates it afterwards.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable

import yaml

from faithscan.errors import RegistryError
from faithscan.languages.models import (
    UNKNOWN_CODE,
    UNKNOWN_NAME,
    GospelKeywordSet,
    LanguageSignature,
    ProhibitedTermSet,
)
from faithscan.utils.text import normalize

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "languages.yaml"


class LanguageRegistry:
    """Read-only lookups over the supported languages."""

    def __init__(
        self,
        signatures: Iterable[LanguageSignature],
        gospel_keywords: Iterable[GospelKeywordSet] = (),
        prohibited_terms: ProhibitedTermSet | None = None,
    ):
        self._signatures: tuple[LanguageSignature, ...] = tuple(signatures)
        self._by_code = MappingProxyType({s.code: s for s in self._signatures})
        self._by_locale = MappingProxyType(
            {locale.lower(): s.code for s in self._signatures for locale in s.locales}
        )
        self._gospel = MappingProxyType({g.language_code: g for g in gospel_keywords})
        self._prohibited = prohibited_terms or ProhibitedTermSet()

        if len(self._by_code) != len(self._signatures):
            raise RegistryError("<registry>", "duplicate language codes")
        if UNKNOWN_CODE.upper() in {code.upper() for code in self._by_code}:
            raise RegistryError("<registry>", f"'{UNKNOWN_CODE}' is reserved")
        stray = set(self._gospel) - set(self._by_code)
        if stray:
            raise RegistryError(
                "<registry>", f"gospel keywords for unregistered languages: {sorted(stray)}"
            )

    # -- lookups -------------------------------------------------------------

    def all_language_codes(self) -> list[str]:
        """Registered codes in declaration order."""
        return [s.code for s in self._signatures]

    def is_supported_language(self, code: object) -> bool:
        """True for a registry code (any case) or one of its speech locales."""
        return self._resolve(code) is not None

    def language_name(self, code: str) -> str:
        """Display name for *code*; unrecognised codes are returned unchanged."""
        if code == UNKNOWN_CODE:
            return UNKNOWN_NAME
        resolved = self._resolve(code)
        return self._by_code[resolved].name if resolved else code

    def gospel_keywords(self, code: str) -> GospelKeywordSet:
        resolved = self._resolve(code)
        if resolved is None or resolved not in self._gospel:
            return GospelKeywordSet(language_code=resolved or str(code))
        return self._gospel[resolved]

    def prohibited_terms(self) -> ProhibitedTermSet:
        return self._prohibited

    def signatures(self) -> tuple[LanguageSignature, ...]:
        return self._signatures

    def signature(self, code: str) -> LanguageSignature | None:
        resolved = self._resolve(code)
        return self._by_code[resolved] if resolved else None

    def locale_codes(self) -> list[str]:
        """Every speech locale, for configuring the transcription service."""
        return [locale for s in self._signatures for locale in s.locales]

    def code_for_locale(self, locale: str) -> str | None:
        if not isinstance(locale, str):
            return None
        return self._by_locale.get(locale.lower())

    def _resolve(self, code: object) -> str | None:
        if not isinstance(code, str) or not code:
            return None
        if code in self._by_code:
            return code
        upper = code.upper()
        if upper in self._by_code:
            return upper
        return self.code_for_locale(code)

    def __len__(self) -> int:
        return len(self._signatures)

    def __contains__(self, code: object) -> bool:
        return self.is_supported_language(code)


def load_registry(path: str | Path | None = None) -> LanguageRegistry:
    """Build a registry from a YAML data file.

    Raises:
        RegistryError: if the file is missing, unparsable or malformed.
    """
    source = Path(path) if path else DEFAULT_DATA_PATH
    try:
        with open(source, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise RegistryError(str(source), "file not found") from None
    except yaml.YAMLError as e:
        raise RegistryError(str(source), f"invalid YAML: {e}") from e

    registry = registry_from_dict(data, source=str(source))
    logger.info(
        "Loaded %d languages and %d prohibited terms from %s",
        len(registry),
        len(registry.prohibited_terms()),
        source,
    )
    return registry


def registry_from_dict(data: object, source: str = "<dict>") -> LanguageRegistry:
    """Build a registry from an already parsed mapping."""
    if not isinstance(data, dict):
        raise RegistryError(source, "top level must be a mapping")

    languages = data.get("languages")
    if not isinstance(languages, list) or not languages:
        raise RegistryError(source, "'languages' must be a non-empty list")

    signatures = []
    gospel = []
    for i, entry in enumerate(languages):
        where = f"languages[{i}]"
        if not isinstance(entry, dict):
            raise RegistryError(source, f"{where} must be a mapping")
        code = entry.get("code")
        if not isinstance(code, str) or not code.strip():
            raise RegistryError(source, f"{where}.code must be a non-empty string")
        code = code.strip()

        signatures.append(
            LanguageSignature(
                code=code,
                name=str(entry.get("name") or code.title()),
                locales=tuple(_strings(entry.get("locales", []), source, f"{where}.locales")),
                diacritic_markers=frozenset(
                    _diacritics(entry.get("diacritics", []), source, f"{where}.diacritics")
                ),
                marker_words=_normalized(entry.get("markers", []), source, f"{where}.markers"),
            )
        )
        keywords = _normalized(
            entry.get("gospel_keywords", []), source, f"{where}.gospel_keywords"
        )
        gospel.append(GospelKeywordSet(language_code=code, keywords=keywords))

    prohibited = ProhibitedTermSet(
        terms=_normalized(data.get("prohibited_terms", []), source, "prohibited_terms")
    )
    return LanguageRegistry(signatures, gospel, prohibited)


@lru_cache(maxsize=1)
def default_registry() -> LanguageRegistry:
    """The bundled registry, built on first use and shared by the process."""
    return load_registry()


def _strings(values: object, source: str, where: str) -> list[str]:
    if values is None:
        return []
    if not isinstance(values, list):
        raise RegistryError(source, f"{where} must be a list")
    for value in values:
        if not isinstance(value, str):
            raise RegistryError(source, f"{where} holds a non-string entry: {value!r}")
    return values


def _normalized(values: object, source: str, where: str) -> frozenset[str]:
    return frozenset(n for n in (normalize(v) for v in _strings(values, source, where)) if n)


def _diacritics(values: object, source: str, where: str) -> list[str]:
    chars = [normalize(v) for v in _strings(values, source, where)]
    for ch in chars:
        if len(ch) != 1:
            raise RegistryError(source, f"{where} entries must be single characters, got {ch!r}")
    return chars
