"""Text normalization shared by the language detector and keyword scanner.

Both components see text through ``normalize`` so a word is the same word
to each of them: NFC-composed, lowercased, punctuation replaced by spaces,
whitespace collapsed.  Apostrophes inside words survive (Hausa ``addu'a``)
and so do combining marks (Yoruba ``dúpẹ́`` keeps its tone mark).
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'", "`": "'"})

# Hooked letters have no decomposition, so NFD alone leaves them intact.
_HOOKED_LETTERS = str.maketrans({"ɗ": "d", "ƙ": "k", "ɓ": "b", "ƴ": "y"})


def normalize(text: str | None) -> str:
    """Return the canonical form of *text* used for all matching.

    Idempotent: ``normalize(normalize(t)) == normalize(t)``.
    """
    if not text:
        return ""
    folded = unicodedata.normalize("NFC", text.lower()).translate(_APOSTROPHES)
    cleaned = "".join(" " if _is_separator(ch) else ch for ch in folded)
    tokens = (token.strip("'") for token in cleaned.split())
    return " ".join(token for token in tokens if token)


def tokenize(text: str | None) -> list[str]:
    return normalize(text).split()


def strip_diacritics(text: str) -> str:
    """Drop accents and tone marks: ``olúwa`` -> ``oluwa``, ``ɗan`` -> ``dan``."""
    decomposed = unicodedata.normalize("NFD", text)
    bare = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", bare.translate(_HOOKED_LETTERS))


def _is_separator(ch: str) -> bool:
    if ch == "'":
        return False
    # Punctuation, symbols, separators and control characters split words.
    return unicodedata.category(ch)[0] in "PSZC"


class TermMatcher:
    """Whole-word matcher over a fixed set of words and phrases.

    Single words are looked up in a dict; multi-word phrases are matched on
    token boundaries.  With ``tolerant`` set, every term is also indexed in
    its diacritic-stripped form and the text is checked both as written and
    stripped, so ``oluwa`` finds ``olúwa`` and the other way round.
    """

    def __init__(self, terms: Iterable[str], tolerant: bool = True):
        self.tolerant = tolerant
        self._words: dict[str, str] = {}
        phrases: dict[str, set[str]] = {}

        for term in terms:
            canonical = normalize(term)
            if not canonical:
                continue
            variants = {canonical}
            if tolerant:
                variants.add(strip_diacritics(canonical))
            if " " in canonical:
                phrases.setdefault(canonical, set()).update(variants)
            else:
                for variant in sorted(variants):
                    self._words.setdefault(variant, canonical)

        self._phrases: list[tuple[str, tuple[str, ...]]] = [
            (canonical, tuple(sorted(variants)))
            for canonical, variants in sorted(phrases.items())
        ]

    def __len__(self) -> int:
        return len(set(self._words.values())) + len(self._phrases)

    def matches(self, text: str | None) -> bool:
        """True on the first term found in *text*."""
        tokens = tokenize(text)
        if not tokens:
            return False
        for view in self._token_views(tokens):
            if any(token in self._words for token in view):
                return True
        for padded in self._padded_views(tokens):
            for _, variants in self._phrases:
                if any(f" {v} " in padded for v in variants):
                    return True
        return False

    def find(self, text: str | None) -> list[str]:
        """Every distinct term present in *text*, in first-seen order."""
        tokens = tokenize(text)
        found: dict[str, None] = {}
        for view in self._token_views(tokens):
            for token in view:
                if token in self._words:
                    found.setdefault(self._words[token])
        for padded in self._padded_views(tokens):
            for canonical, variants in self._phrases:
                if any(f" {v} " in padded for v in variants):
                    found.setdefault(canonical)
        return list(found)

    def count(self, tokens: list[str]) -> int:
        """Number of term occurrences in an already tokenized text.

        A token or phrase counts once even when it matches both as written
        and stripped.
        """
        hits = 0
        for token in tokens:
            if token in self._words:
                hits += 1
            elif self.tolerant and strip_diacritics(token) in self._words:
                hits += 1
        views = self._token_views(tokens)
        for _, variants in self._phrases:
            hits += max(_count_windows(view, v.split(" ")) for view in views for v in variants)
        return hits

    def _token_views(self, tokens: list[str]) -> list[list[str]]:
        if not self.tolerant:
            return [tokens]
        return [tokens, [strip_diacritics(t) for t in tokens]]

    def _padded_views(self, tokens: list[str]) -> list[str]:
        if not self._phrases:
            return []
        padded = f" {' '.join(tokens)} "
        if not self.tolerant:
            return [padded]
        return [padded, strip_diacritics(padded)]


def _count_windows(tokens: list[str], words: list[str]) -> int:
    """Non-overlapping occurrences of the token sequence *words*."""
    size = len(words)
    hits = i = 0
    while i + size <= len(tokens):
        if tokens[i : i + size] == words:
            hits += 1
            i += size
        else:
            i += 1
    return hits
