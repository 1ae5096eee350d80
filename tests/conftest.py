"""Shared fixtures."""

import pytest

from faithscan.languages.registry import default_registry, registry_from_dict
from faithscan.moderation.engine import ModerationDecisionEngine


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def engine(registry):
    return ModerationDecisionEngine(registry)


@pytest.fixture
def tiny_registry():
    """One dummy language, so tests do not depend on the bundled data."""
    return registry_from_dict(
        {
            "languages": [
                {
                    "code": "DUMMY",
                    "name": "Dummy",
                    "locales": ["du-XX"],
                    "diacritics": ["ŵ"],
                    "markers": ["zork", "blip blop"],
                    "gospel_keywords": ["zion", "holy mountain"],
                },
            ],
            "prohibited_terms": ["badword"],
        }
    )
