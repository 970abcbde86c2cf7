# src/yahtzee/config.py
"""Configuration schema and loaders for the Yahtzee scorer.

Rule parameters (flat scores and multiplicities) and logging options live in
small dataclasses. YAML overlays are merged in order and individual values can
be overridden with ``section.option=value`` pairs from the command line.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]

from yahtzee.utils.yaml_helpers import expand_dotted_keys

LOGGER = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Dataclasses (schema)
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class RulesConfig:
    """Parameters of the lower-section rules."""

    three_of_a_kind: int = 3  # minimum multiplicity
    four_of_a_kind: int = 4  # minimum multiplicity
    full_house: int = 25
    small_straight: int = 30
    large_straight: int = 40
    yahtzee: int = 50


@dataclass
class LoggingConfig:
    """Root logger settings applied by the CLI."""

    level: str = "INFO"
    log_file: Path | None = None


@dataclass
class AppConfig:
    """Top-level configuration container."""

    rules: RulesConfig = field(default_factory=RulesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ─────────────────────────────────────────────────────────────────────────────
# Loader (one or more YAML overlays; dotted keys allowed)
# ─────────────────────────────────────────────────────────────────────────────


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``overlay`` onto ``base`` and return a new mapping."""
    result: dict[str, Any] = dict(base)
    for key, val in overlay.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(val, Mapping):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _annotation_contains(annotation: Any, target: type) -> bool:
    """Recursively inspect type annotations for the presence of ``target``."""
    if annotation is None:
        return False
    if annotation is target:
        return True
    origin = get_origin(annotation)
    if origin is None:
        return False
    return any(_annotation_contains(arg, target) for arg in get_args(annotation))


def _build(cls: type, section: Mapping[str, Any] | None) -> Any:
    """Instantiate the dataclass ``cls`` from a mapping of attributes."""
    section = section or {}
    obj = cls()
    type_hints = get_type_hints(cls)
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = set(section) - known
    if unknown:
        raise AttributeError(f"Unknown option(s) {sorted(unknown)!r} for {cls.__name__}")
    for name, val in section.items():
        annotation = type_hints.get(name)
        if _annotation_contains(annotation, Path) and isinstance(val, str):
            val = Path(val)
        setattr(obj, name, val)
    return obj


def load_app_config(*overlays: Path) -> AppConfig:
    """Deterministically merge one or more YAML overlays into an :class:`AppConfig`.

    Files are read in the order provided, dotted keys are expanded, and later
    overlays always win.
    """
    data: dict[str, Any] = {}
    for path in overlays:
        with Path(path).open("r", encoding="utf-8") as fh:
            overlay = yaml.safe_load(fh) or {}
        if not isinstance(overlay, Mapping):
            raise TypeError(f"Config file {path} must contain a mapping")
        data = _deep_merge(data, expand_dotted_keys(overlay))
        LOGGER.debug("Config overlay merged", extra={"stage": "config", "path": str(path)})

    unknown = set(data) - {"rules", "logging"}
    if unknown:
        raise AttributeError(f"Unknown config section(s) {sorted(unknown)!r}")

    return AppConfig(
        rules=_build(RulesConfig, data.get("rules", {})),
        logging=_build(LoggingConfig, data.get("logging", {})),
    )


def _coerce(value: str, current: Any, annotation: Any | None = None) -> Any:
    """Coerce ``value`` to the type of ``current``."""
    if isinstance(current, bool) or _annotation_contains(annotation, bool):
        val_lower = value.lower()
        if val_lower in {"1", "true", "yes", "on"}:
            return True
        if val_lower in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"Cannot parse boolean value from {value!r}")
    if isinstance(current, int) or _annotation_contains(annotation, int):
        return int(value)
    if isinstance(current, Path) or _annotation_contains(annotation, Path):
        if value.lower() in {"", "none", "null"}:
            return None
        return Path(value)
    return value


def apply_dot_overrides(cfg: AppConfig, pairs: list[str]) -> AppConfig:
    """Apply ``section.option=value`` overrides to *cfg*."""
    for pair in pairs:
        if "=" not in pair:
            raise ValueError(f"Invalid override {pair!r}")
        key, raw = pair.split("=", 1)
        if "." not in key:
            raise ValueError(f"Invalid override {pair!r}")
        section_name, option = key.split(".", 1)
        section = getattr(cfg, section_name, None)
        if section is None or not dataclasses.is_dataclass(section):
            raise AttributeError(f"Unknown config section {section_name!r}")
        if not hasattr(section, option):
            raise AttributeError(f"Unknown option {option!r} in section {section_name!r}")
        current = getattr(section, option)
        annotation = get_type_hints(type(section)).get(option)
        setattr(section, option, _coerce(raw, current, annotation))
        LOGGER.debug(
            "Config override applied",
            extra={"stage": "config", "key": key, "value": raw},
        )
    return cfg


__all__ = [
    "RulesConfig",
    "LoggingConfig",
    "AppConfig",
    "load_app_config",
    "apply_dot_overrides",
]
