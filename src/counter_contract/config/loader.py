from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from counter_contract.config.models import AppConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


_TOP_LEVEL_KEYS = {"version", "storage", "logging"}


def load_config(path: Path) -> AppConfig:
    # YAML loader: raw mapping is checked first, then validated into typed models.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")
    if "version" not in raw:
        raise ConfigError("Missing required top-level key: version")
