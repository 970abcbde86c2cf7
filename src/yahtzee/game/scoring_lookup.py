# src/yahtzee/game/scoring_lookup.py
"""Precomputed scores for every five-dice multiset.

Five dice over six faces give only 252 distinct multisets, so the whole score
sheet can be tabulated once. Keys are the ``(c1, …, c6)`` counts tuples from
:func:`yahtzee.game.dice.face_counts`; values are the thirteen category scores
in :class:`~yahtzee.game.categories.Category` order.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from itertools import combinations_with_replacement
from typing import Dict, Tuple

from yahtzee.game.categories import Category, Rulebook, score_all
from yahtzee.game.dice import FACES, NUM_DICE, counts_to_roll, face_counts
from yahtzee.utils.types import RollLike, SixFaceCounts

LOGGER = logging.getLogger(__name__)

ScoreRow = Tuple[int, ...]  # one score per Category, in sheet order


def build_score_lookup_table(rulebook: Rulebook | None = None) -> dict[SixFaceCounts, ScoreRow]:
    """
    Tabulate every category score for every distinct roll.

    Inputs:
        rulebook: Rules to apply; ``None`` means the default rulebook.

    Returns:
        A dictionary mapping (c1, c2, c3, c4, c5, c6) tuples to a tuple of
        thirteen scores ordered like :class:`Category`.
    """
    look: Dict[SixFaceCounts, ScoreRow] = {}
    for multiset in combinations_with_replacement(FACES, NUM_DICE):
        key = face_counts(multiset)
        scores = score_all(multiset, rulebook)
        look[key] = tuple(scores[c] for c in Category)
    LOGGER.debug("Score lookup table built", extra={"stage": "lookup", "rows": len(look)})
    return look


@lru_cache(maxsize=1)
def default_score_table() -> dict[SixFaceCounts, ScoreRow]:
    """The lookup table for the default rulebook, built on first use."""
    return build_score_lookup_table()


def score_roll_cached(roll: RollLike) -> ScoreRow:
    """Score *roll* in every category via the default table.

    Raises
    ------
    InvalidRollError:
        If *roll* is malformed.
    """
    return default_score_table()[face_counts(roll)]


def score_rows(table: dict[SixFaceCounts, ScoreRow]) -> list[dict[str, object]]:
    """Flatten *table* into ``{"dice": [...], "scores": {name: pts}}`` records.

    Records are ordered by their sorted dice so exports are stable.
    """
    rows = []
    for key in sorted(table, key=counts_to_roll):
        rows.append(
            {
                "dice": list(counts_to_roll(key)),
                "scores": {c.name.lower(): pts for c, pts in zip(Category, table[key])},
            }
        )
    return rows


__all__ = [
    "ScoreRow",
    "build_score_lookup_table",
    "default_score_table",
    "score_roll_cached",
    "score_rows",
]
