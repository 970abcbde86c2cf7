"""Utility helpers shared across the :mod:`yahtzee` package."""

from __future__ import annotations

from yahtzee.utils.logging import configure_logging, setup_info_logging, setup_warning_logging
from yahtzee.utils.yaml_helpers import expand_dotted_keys

__all__ = [
    "configure_logging",
    "expand_dotted_keys",
    "setup_info_logging",
    "setup_warning_logging",
]
