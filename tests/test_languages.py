"""Tests for the language registry."""

import dataclasses
import tempfile
from itertools import combinations
from pathlib import Path

import pytest
import yaml

from faithscan.errors import RegistryError
from faithscan.languages.models import UNKNOWN_CODE
from faithscan.languages.registry import (
    LanguageRegistry,
    default_registry,
    load_registry,
    registry_from_dict,
)
from faithscan.utils.text import strip_diacritics


def _write_yaml(data) -> str:
    """Write data to a temporary YAML file and return the path."""
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False, encoding="utf-8")
    yaml.safe_dump(data, f, allow_unicode=True)
    f.close()
    return f.name


def test_bundled_languages(registry):
    assert registry.all_language_codes() == ["ENGLISH", "YORUBA", "HAUSA", "IGBO"]
    assert len(registry) == 4


def test_every_code_is_supported(registry):
    for code in registry.all_language_codes():
        assert registry.is_supported_language(code)
        assert code in registry


def test_is_supported_language_accepts_case_and_locales(registry):
    assert registry.is_supported_language("yoruba")
    assert registry.is_supported_language("yo-NG")
    assert registry.is_supported_language("EN-us")
    assert not registry.is_supported_language(UNKNOWN_CODE)
    assert not registry.is_supported_language("FRENCH")
    assert not registry.is_supported_language("")
    assert not registry.is_supported_language(None)
    assert not registry.is_supported_language(42)


def test_language_name(registry):
    assert registry.language_name("YORUBA") == "Yoruba"
    assert registry.language_name("ha-NG") == "Hausa"
    assert registry.language_name(UNKNOWN_CODE) == "Unknown"
    assert registry.language_name("xx-YY") == "xx-YY"


def test_locales(registry):
    locales = registry.locale_codes()
    assert {"en-US", "en-NG", "yo-NG", "ha-NG", "ig-NG"} == set(locales)
    assert registry.code_for_locale("ig-ng") == "IGBO"
    assert registry.code_for_locale("fr-FR") is None


def test_gospel_keywords(registry):
    assert "chineke" in registry.gospel_keywords("IGBO").keywords
    assert "worship" in registry.gospel_keywords("ENGLISH").keywords
    assert "addu'a" in registry.gospel_keywords("HAUSA").keywords
    assert registry.gospel_keywords("KLINGON").keywords == frozenset()


def test_prohibited_terms(registry):
    terms = registry.prohibited_terms().terms
    assert "explicit" in terms
    assert "kill yourself" in terms


def test_yaml_boolean_words_survive_loading(registry):
    assert "on" in registry.signature("ENGLISH").marker_words


def test_marker_words_are_disjoint_across_languages(registry):
    stripped = {
        sig.code: {strip_diacritics(w) for w in sig.marker_words}
        for sig in registry.signatures()
    }
    for a, b in combinations(stripped, 2):
        assert not stripped[a] & stripped[b], f"{a}/{b} share {stripped[a] & stripped[b]}"


def test_default_registry_is_built_once():
    assert default_registry() is default_registry()


def test_signatures_are_immutable(registry):
    sig = registry.signature("HAUSA")
    with pytest.raises(dataclasses.FrozenInstanceError):
        sig.name = "Changed"
    assert isinstance(sig.marker_words, frozenset)


def test_fixture_registry(tiny_registry):
    assert tiny_registry.all_language_codes() == ["DUMMY"]
    assert tiny_registry.language_name("du-XX") == "Dummy"
    assert tiny_registry.signature("DUMMY").diacritic_markers == frozenset({"ŵ"})
    assert tiny_registry.prohibited_terms().terms == frozenset({"badword"})


def test_load_registry_from_file():
    path = _write_yaml(
        {
            "languages": [
                {"code": "LATIN", "name": "Latin", "markers": ["Et", "Est"], "gospel_keywords": ["Deus"]},
            ],
        }
    )
    reg = load_registry(path)
    assert reg.all_language_codes() == ["LATIN"]
    assert reg.signature("LATIN").marker_words == frozenset({"et", "est"})
    assert reg.gospel_keywords("LATIN").keywords == frozenset({"deus"})
    assert len(reg.prohibited_terms()) == 0


def test_load_registry_missing_file():
    with pytest.raises(RegistryError, match="not found"):
        load_registry("/nonexistent/languages.yaml")


def test_load_registry_invalid_yaml():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write("{{invalid yaml::: [")
    f.close()
    with pytest.raises(RegistryError, match="invalid YAML"):
        load_registry(f.name)


@pytest.mark.parametrize(
    "data, message",
    [
        ([], "mapping"),
        ({"languages": []}, "non-empty list"),
        ({"languages": ["ENGLISH"]}, "must be a mapping"),
        ({"languages": [{"name": "No code"}]}, "code"),
        ({"languages": [{"code": "X", "markers": "word"}]}, "must be a list"),
        ({"languages": [{"code": "X", "markers": [True]}]}, "non-string"),
        ({"languages": [{"code": "X", "diacritics": ["ab"]}]}, "single characters"),
        ({"languages": [{"code": "X"}, {"code": "X"}]}, "duplicate"),
        ({"languages": [{"code": "unknown"}]}, "reserved"),
    ],
)
def test_registry_from_dict_rejects_malformed_data(data, message):
    with pytest.raises(RegistryError, match=message):
        registry_from_dict(data)


def test_bundled_data_path_exists():
    from faithscan.languages.registry import DEFAULT_DATA_PATH

    assert Path(DEFAULT_DATA_PATH).is_file()


def test_registry_with_no_keyword_sets():
    reg = LanguageRegistry(registry_from_dict({"languages": [{"code": "A"}]}).signatures())
    assert reg.gospel_keywords("A").keywords == frozenset()
    assert len(reg.prohibited_terms()) == 0
