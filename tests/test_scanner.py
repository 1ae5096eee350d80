"""Tests for gospel and prohibited keyword scanning."""

import pytest

from faithscan.scanning.scanner import KeywordScanner
from faithscan.utils.text import normalize


@pytest.fixture
def scanner(registry):
    return KeywordScanner(registry)


def test_gospel_keywords_are_case_insensitive(scanner):
    assert scanner.contains_gospel_keywords("JESUS CHRIST")
    assert scanner.contains_gospel_keywords("jesus christ")
    assert scanner.contains_gospel_keywords("JESUS CHRIST") == scanner.contains_gospel_keywords(
        "jesus christ"
    )


@pytest.mark.parametrize(
    "text",
    [
        "Sunday worship service",
        "Praise Olúwa",
        "praise oluwa",  # diacritics dropped by the uploader
        "OLORUN O SEUN",
        "Chineke na-agba ume",
        "Na gode, Ubangiji",
        "Addu’a ta safe",  # typographic apostrophe
        "filled with the Holy-Spirit",
        "mmụọ nsọ",
        "mmuo nso",
    ],
)
def test_gospel_keywords_found(scanner, text):
    assert scanner.contains_gospel_keywords(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Fuji music, party time, let's dance",
        "jesusfreak merch",  # whole words only
        "the spirit of the holy season",
    ],
)
def test_gospel_keywords_not_found(scanner, text):
    assert not scanner.contains_gospel_keywords(text)


def test_prohibited_terms(scanner):
    assert scanner.contains_prohibited_terms("Explicit content with bad words")
    assert scanner.contains_prohibited_terms("EXPLICIT")
    assert scanner.contains_prohibited_terms("just kill yourself")
    assert not scanner.contains_prohibited_terms("a skillful choir")
    assert not scanner.contains_prohibited_terms("inexplicitly vague")
    assert not scanner.contains_prohibited_terms("")


def test_non_string_input_never_matches(scanner):
    assert not scanner.contains_gospel_keywords(None)
    assert not scanner.contains_prohibited_terms(None)
    assert not scanner.contains_gospel_keywords(42)
    assert scanner.gospel_matches(None) == {}
    assert scanner.prohibited_matches(None) == []


def test_raw_and_normalized_input_agree(scanner):
    for text in ["Jésù olúwa mi, dúpẹ́!", "Explicit, KILL", "Na gode...", "party"]:
        assert scanner.contains_gospel_keywords(text) == scanner.contains_gospel_keywords(
            normalize(text)
        )
        assert scanner.contains_prohibited_terms(text) == scanner.contains_prohibited_terms(
            normalize(text)
        )


def test_gospel_matches_by_language(scanner):
    matches = scanner.gospel_matches("Jesus is Olúwa")
    assert matches == {"ENGLISH": ["jesus"], "YORUBA": [normalize("olúwa")]}


def test_prohibited_matches(scanner):
    assert scanner.prohibited_matches("kill the hate") == ["kill", "hate"]
    assert scanner.prohibited_matches("peace and love") == []


def test_fixture_registry(tiny_registry):
    scanner = KeywordScanner(tiny_registry)
    assert scanner.contains_gospel_keywords("Climb Zion")
    assert scanner.contains_gospel_keywords("the holy mountain")
    assert not scanner.contains_gospel_keywords("jesus")  # not in the fixture
    assert scanner.contains_prohibited_terms("BADWORD!")
    assert not scanner.contains_prohibited_terms("explicit")
