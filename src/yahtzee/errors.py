"""Exceptions raised at the scoring boundary."""

from __future__ import annotations


class YahtzeeError(Exception):
    """Base class for every error raised by :mod:`yahtzee`."""


class InvalidRollError(YahtzeeError, ValueError):
    """A roll is not exactly five integer dice in ``1``–``6``."""


class RuleConfigError(YahtzeeError, ValueError):
    """A rule was constructed with out-of-range parameters."""


__all__ = ["YahtzeeError", "InvalidRollError", "RuleConfigError"]
