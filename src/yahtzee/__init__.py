# src/yahtzee/__init__.py
"""Yahtzee category scoring - pure rule evaluators, lookup table and CLI.

The scoring surface is exposed lazily so ``import yahtzee`` stays cheap for
callers that only need the config or logging helpers; the Numba kernels are
compiled the first time a roll is scored.
"""

from __future__ import annotations

import tomllib
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _v
from pathlib import Path

# Path to the project's pyproject.toml for local version fallback
PYPROJECT_TOML = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

__all__ = [  # loads lazily, that's why reportUnsupportedDunderAll is triggered
    "Category",  # pyright: ignore[reportUnsupportedDunderAll]
    "DEFAULT_RULEBOOK",  # pyright: ignore[reportUnsupportedDunderAll]
    "build_rulebook",  # pyright: ignore[reportUnsupportedDunderAll]
    "score_category",  # pyright: ignore[reportUnsupportedDunderAll]
    "score_all",  # pyright: ignore[reportUnsupportedDunderAll]
    "score_roll_cached",  # pyright: ignore[reportUnsupportedDunderAll]
    "evaluate",  # pyright: ignore[reportUnsupportedDunderAll]
    "InvalidRollError",  # pyright: ignore[reportUnsupportedDunderAll]
    "RuleConfigError",  # pyright: ignore[reportUnsupportedDunderAll]
]

_LAZY_IMPORTS = {
    "Category": "yahtzee.game.categories",
    "DEFAULT_RULEBOOK": "yahtzee.game.categories",
    "build_rulebook": "yahtzee.game.categories",
    "score_category": "yahtzee.game.categories",
    "score_all": "yahtzee.game.categories",
    "score_roll_cached": "yahtzee.game.scoring_lookup",
    "evaluate": "yahtzee.game.rules",
    "InvalidRollError": "yahtzee.errors",
    "RuleConfigError": "yahtzee.errors",
}


def __getattr__(name: str):  # pragma: no cover - simple dynamic loader
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    attr = getattr(import_module(module_name), name)
    globals()[name] = attr
    return attr


def _read_version_from_toml() -> str:
    """Return the package version declared in ``pyproject.toml``.

    Used when running from a source checkout that was never installed.
    """
    with PYPROJECT_TOML.open("rb") as fh:
        data = tomllib.load(fh)
    return data["project"]["version"]


try:
    __version__ = _v("yahtzee-rules")
except PackageNotFoundError:
    __version__ = _read_version_from_toml()
