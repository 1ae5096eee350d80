"""Tunable weights and thresholds for detection and moderation.

Settings load from a YAML file with optional ``detector:`` and
``moderation:`` sections::

    detector:
      diacritic_weight: 3.0
    moderation:
      approval_threshold: 0.6

Keys left out keep their defaults.  The path comes from the caller, or
from the ``FAITHSCAN_CONFIG`` environment variable when none is given.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

import yaml

from faithscan.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FAITHSCAN_CONFIG"


@dataclass(frozen=True)
class DetectorSettings:
    """Language detector tunables."""

    diacritic_weight: float = 3.0  # Must outweigh the marker-word term (1.0)
    min_confidence: float = 0.03  # Below this the result is "unknown"
    tie_epsilon: float = 0.01  # Scores this close count as a tie


@dataclass(frozen=True)
class ModerationSettings:
    """Confidence increments and thresholds for the decision engine."""

    gospel_weight: float = 0.5
    language_weight: float = 0.2  # Multiplied by the detector confidence
    transcript_weight: float = 0.1
    title_weight: float = 0.2
    approval_threshold: float = 0.5
    prohibited_confidence: float = 0.1
    min_transcript_chars: int = 3


@dataclass(frozen=True)
class Settings:
    detector: DetectorSettings = field(default_factory=DetectorSettings)
    moderation: ModerationSettings = field(default_factory=ModerationSettings)


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from *path*, ``$FAITHSCAN_CONFIG`` or the defaults.

    Raises:
        ConfigError: for unreadable files, unknown keys or out-of-range values.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Settings()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(str(path), f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"invalid YAML: {e}") from e

    settings = settings_from_dict(data)
    logger.info("Loaded settings from %s", path)
    return settings


def settings_from_dict(data: object) -> Settings:
    if not isinstance(data, dict):
        raise ConfigError("<root>", "settings must be a mapping")

    unknown = set(data) - {"detector", "moderation"}
    if unknown:
        raise ConfigError(sorted(unknown)[0], "unknown section")

    detector = _section(DetectorSettings(), data.get("detector"), "detector")
    moderation = _section(ModerationSettings(), data.get("moderation"), "moderation")
    _validate_detector(detector)
    _validate_moderation(moderation)
    return Settings(detector=detector, moderation=moderation)


def _section(defaults, values: object, name: str):
    if values is None:
        return defaults
    if not isinstance(values, dict):
        raise ConfigError(name, "section must be a mapping")

    types = {f.name: f.type for f in fields(defaults)}
    changes = {}
    for key, value in values.items():
        if key not in types:
            raise ConfigError(f"{name}.{key}", "unknown key")
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{name}.{key}", f"expected a number, got {value!r}")
        if types[key] == "int":
            if int(value) != value:
                raise ConfigError(f"{name}.{key}", f"expected an integer, got {value!r}")
            value = int(value)
        else:
            value = float(value)
        changes[key] = value
    return replace(defaults, **changes)


def _validate_detector(s: DetectorSettings) -> None:
    if s.diacritic_weight <= 1.0:
        raise ConfigError("detector.diacritic_weight", "must be greater than 1.0")
    _check_unit("detector.min_confidence", s.min_confidence)
    if not 0.0 <= s.tie_epsilon < 1.0:
        raise ConfigError("detector.tie_epsilon", "must be in [0, 1)")


def _validate_moderation(s: ModerationSettings) -> None:
    for name in (
        "gospel_weight",
        "language_weight",
        "transcript_weight",
        "title_weight",
        "approval_threshold",
        "prohibited_confidence",
    ):
        _check_unit(f"moderation.{name}", getattr(s, name))
    if s.min_transcript_chars < 0:
        raise ConfigError("moderation.min_transcript_chars", "must not be negative")


def _check_unit(key: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(key, f"must be in [0, 1], got {value}")
