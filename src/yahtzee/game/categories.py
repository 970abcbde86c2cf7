# src/yahtzee/game/categories.py
"""The thirteen score-sheet categories and the rulebook binding them to rules.

A rulebook is a read-only ``Category -> Rule`` mapping. The default one is
built once at import; :func:`build_rulebook` makes others from a
:class:`~yahtzee.config.RulesConfig`. The module-level ``ones`` … ``chance``
functions score a roll under the default rulebook.
"""

from __future__ import annotations

import logging
import re
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from yahtzee.config import RulesConfig
from yahtzee.game.rules import (
    FaceValueSum,
    FullHouse,
    LargeStraight,
    MatchingSetSum,
    Rule,
    SmallStraight,
    Yahtzee,
    evaluate,
)
from yahtzee.utils.types import RollLike, Score

LOGGER = logging.getLogger(__name__)

Rulebook = Mapping["Category", Rule]


class Category(IntEnum):
    """Score-sheet categories in sheet order."""

    ONES = 1
    TWOS = 2
    THREES = 3
    FOURS = 4
    FIVES = 5
    SIXES = 6
    THREE_OF_A_KIND = 7
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 9
    SMALL_STRAIGHT = 10
    LARGE_STRAIGHT = 11
    YAHTZEE = 12
    CHANCE = 13

    @property
    def is_upper(self) -> bool:
        return self <= Category.SIXES

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """Look up a category by name.

        Accepts ``FULL_HOUSE``, ``full-house``, ``fullHouse``, ``threeOfAKind`` and the short
        ``threeOfKind`` / ``three_of_kind`` spellings.
        """
        snake = re.sub(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])", "_", name.strip())
        key = re.sub(r"[\s\-]+", "_", snake).upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown category {name!r}") from None


_ALIASES = {
    "THREE_OF_KIND": "THREE_OF_A_KIND",
    "FOUR_OF_KIND": "FOUR_OF_A_KIND",
}

UPPER = tuple(c for c in Category if c.is_upper)
LOWER = tuple(c for c in Category if not c.is_upper)


def build_rulebook(cfg: RulesConfig | None = None) -> Rulebook:
    """Construct one rule per category from *cfg*.

    Raises
    ------
    RuleConfigError:
        If any configured parameter is out of range.
    """
    cfg = cfg or RulesConfig()
    book: dict[Category, Rule] = {c: FaceValueSum(int(c)) for c in UPPER}
    book[Category.THREE_OF_A_KIND] = MatchingSetSum(cfg.three_of_a_kind)
    book[Category.FOUR_OF_A_KIND] = MatchingSetSum(cfg.four_of_a_kind)
    book[Category.FULL_HOUSE] = FullHouse(cfg.full_house)
    book[Category.SMALL_STRAIGHT] = SmallStraight(cfg.small_straight)
    book[Category.LARGE_STRAIGHT] = LargeStraight(cfg.large_straight)
    book[Category.YAHTZEE] = Yahtzee(cfg.yahtzee)
    book[Category.CHANCE] = MatchingSetSum(0)
    LOGGER.debug("Rulebook built", extra={"stage": "rules", "rules": len(book)})
    return MappingProxyType(book)


DEFAULT_RULEBOOK: Rulebook = build_rulebook()


def score_category(
    category: Category | str, roll: RollLike, rulebook: Rulebook | None = None
) -> Score:
    """Score *roll* in a single *category*."""
    if isinstance(category, str):
        category = Category.from_name(category)
    book = DEFAULT_RULEBOOK if rulebook is None else rulebook
    return evaluate(book[category], roll)


def score_all(roll: RollLike, rulebook: Rulebook | None = None) -> dict[Category, Score]:
    """Score *roll* in every category, keyed in sheet order."""
    book = DEFAULT_RULEBOOK if rulebook is None else rulebook
    return {category: evaluate(book[category], roll) for category in Category}


# --------------------------------------------------------------------------- #
# Per-category entry points bound to the default rulebook
# --------------------------------------------------------------------------- #
def ones(roll: RollLike) -> Score:
    return score_category(Category.ONES, roll)


def twos(roll: RollLike) -> Score:
    return score_category(Category.TWOS, roll)


def threes(roll: RollLike) -> Score:
    return score_category(Category.THREES, roll)


def fours(roll: RollLike) -> Score:
    return score_category(Category.FOURS, roll)


def fives(roll: RollLike) -> Score:
    return score_category(Category.FIVES, roll)


def sixes(roll: RollLike) -> Score:
    return score_category(Category.SIXES, roll)


def three_of_kind(roll: RollLike) -> Score:
    return score_category(Category.THREE_OF_A_KIND, roll)


def four_of_kind(roll: RollLike) -> Score:
    return score_category(Category.FOUR_OF_A_KIND, roll)


def full_house(roll: RollLike) -> Score:
    return score_category(Category.FULL_HOUSE, roll)


def small_straight(roll: RollLike) -> Score:
    return score_category(Category.SMALL_STRAIGHT, roll)


def large_straight(roll: RollLike) -> Score:
    return score_category(Category.LARGE_STRAIGHT, roll)


def yahtzee(roll: RollLike) -> Score:
    return score_category(Category.YAHTZEE, roll)


def chance(roll: RollLike) -> Score:
    return score_category(Category.CHANCE, roll)


__all__ = [
    "Category",
    "Rulebook",
    "UPPER",
    "LOWER",
    "DEFAULT_RULEBOOK",
    "build_rulebook",
    "score_category",
    "score_all",
    "ones",
    "twos",
    "threes",
    "fours",
    "fives",
    "sixes",
    "three_of_kind",
    "four_of_kind",
    "full_house",
    "small_straight",
    "large_straight",
    "yahtzee",
    "chance",
]
