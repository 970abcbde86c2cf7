# src/yahtzee/game/rules.py
"""Scoring rules for the thirteen Yahtzee categories.

Each rule is a frozen dataclass holding only its own parameters. The set of
variants is closed: :data:`Rule` is their union and :func:`evaluate` is the
single dispatcher, so adding a variant without teaching ``evaluate`` about it
fails the exhaustiveness check.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import TypeAlias, assert_never

from yahtzee.errors import RuleConfigError
from yahtzee.game.dice import (
    FACES,
    NUM_DICE,
    count_value,
    dice_sum,
    frequency_profile,
    validate_roll,
)
from yahtzee.utils.types import DiceRoll, RollLike, Score

SMALL_STRAIGHT_RUN = 4
FULL_HOUSE_COUNTS = (2, 3)


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


# --------------------------------------------------------------------------- #
# 1.  Rule variants
# --------------------------------------------------------------------------- #
@dataclass(frozen=True)
class FaceValueSum:
    """Ones through sixes: ``value`` times the number of dice showing it."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value not in FACES:
            raise RuleConfigError(f"face value must be in 1-6, got {self.value!r}")
        object.__setattr__(self, "value", int(self.value))

    def evaluate(self, roll: RollLike) -> Score:
        return evaluate(self, roll)


@dataclass(frozen=True)
class MatchingSetSum:
    """Sum of all dice when some face appears at least ``min_count`` times.

    ``min_count=0`` always qualifies, which is how chance is expressed.
    """

    min_count: int

    def __post_init__(self) -> None:
        if not _is_int(self.min_count) or not 0 <= self.min_count <= NUM_DICE:
            raise RuleConfigError(
                f"min_count must be between 0 and {NUM_DICE}, got {self.min_count!r}"
            )
        object.__setattr__(self, "min_count", int(self.min_count))

    def evaluate(self, roll: RollLike) -> Score:
        return evaluate(self, roll)


@dataclass(frozen=True)
class _FlatScoreRule:
    """Base for pattern rules that pay a fixed ``score`` or nothing."""

    score: int

    def __post_init__(self) -> None:
        if not _is_int(self.score) or self.score < 0:
            raise RuleConfigError(
                f"{type(self).__name__} score must be a non-negative int, got {self.score!r}"
            )
        object.__setattr__(self, "score", int(self.score))

    def evaluate(self, roll: RollLike) -> Score:
        return evaluate(self, roll)  # type: ignore[arg-type]


@dataclass(frozen=True)
class FullHouse(_FlatScoreRule):
    """One face three times and another twice. Five of a kind does not count."""

    score: int = 25


@dataclass(frozen=True)
class SmallStraight(_FlatScoreRule):
    """Four distinct consecutive faces anywhere in the roll."""

    score: int = 30


@dataclass(frozen=True)
class LargeStraight(_FlatScoreRule):
    """Five distinct consecutive faces: 1-5 or 2-6."""

    score: int = 40


@dataclass(frozen=True)
class Yahtzee(_FlatScoreRule):
    """All five dice show the same face."""

    score: int = 50


Rule: TypeAlias = FaceValueSum | MatchingSetSum | FullHouse | SmallStraight | LargeStraight | Yahtzee


# --------------------------------------------------------------------------- #
# 2.  Pattern predicates (operate on validated rolls)
# --------------------------------------------------------------------------- #
def longest_run(roll: DiceRoll) -> int:
    """Length of the longest run of consecutive distinct faces.

    Duplicates collapse before scanning, so ``(1, 2, 3, 4, 4)`` gives 4 and
    ``(1, 1, 2, 3, 5)`` gives 3.
    """
    distinct = sorted(set(roll))
    best = current = 1
    for prev, nxt in zip(distinct, distinct[1:]):
        current = current + 1 if nxt == prev + 1 else 1
        best = max(best, current)
    return best


def is_full_house(roll: DiceRoll) -> bool:
    return tuple(sorted(frequency_profile(roll).values())) == FULL_HOUSE_COUNTS


def is_large_straight(roll: DiceRoll) -> bool:
    distinct = set(roll)
    return len(distinct) == NUM_DICE and (1 not in distinct or 6 not in distinct)


def is_yahtzee(roll: DiceRoll) -> bool:
    return len(frequency_profile(roll)) == 1


# --------------------------------------------------------------------------- #
# 3.  Dispatcher
# --------------------------------------------------------------------------- #
def evaluate(rule: Rule, roll: RollLike) -> Score:
    """Score *roll* under *rule*.

    Inputs
    ------
    rule (Rule):
        Any of the rule variants defined in this module.
    roll (Sequence[int]):
        Five dice faces in ``1``–``6``; order is irrelevant.

    Returns
    -------
    int:
        A non-negative score. Flat-score rules return either ``0`` or their
        configured ``score``.

    Raises
    ------
    InvalidRollError:
        If *roll* is malformed.
    """
    dice = validate_roll(roll)
    match rule:
        case FaceValueSum(value=value):
            return value * count_value(dice, value)
        case MatchingSetSum(min_count=min_count):
            counts = frequency_profile(dice).values()
            return dice_sum(dice) if any(c >= min_count for c in counts) else 0
        case FullHouse(score=score):
            return score if is_full_house(dice) else 0
        case SmallStraight(score=score):
            return score if longest_run(dice) >= SMALL_STRAIGHT_RUN else 0
        case LargeStraight(score=score):
            return score if is_large_straight(dice) else 0
        case Yahtzee(score=score):
            return score if is_yahtzee(dice) else 0
        case _:
            assert_never(rule)


__all__ = [
    "Rule",
    "FaceValueSum",
    "MatchingSetSum",
    "FullHouse",
    "SmallStraight",
    "LargeStraight",
    "Yahtzee",
    "evaluate",
    "longest_run",
    "is_full_house",
    "is_large_straight",
    "is_yahtzee",
]
