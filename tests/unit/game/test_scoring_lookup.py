from __future__ import annotations

import pytest

from helpers.dice_strategies import ALL_MULTISETS
from yahtzee.config import RulesConfig
from yahtzee.errors import InvalidRollError
from yahtzee.game.categories import Category, build_rulebook, score_all
from yahtzee.game.scoring_lookup import (
    build_score_lookup_table,
    default_score_table,
    score_roll_cached,
    score_rows,
)


@pytest.mark.unit
def test_table_covers_every_multiset() -> None:
    table = default_score_table()
    assert len(table) == 252
    assert all(sum(key) == 5 for key in table)
    assert all(len(row) == len(Category) for row in table.values())


@pytest.mark.unit
@pytest.mark.parametrize("roll", ALL_MULTISETS, ids=lambda r: "".join(map(str, r)))
def test_cached_scores_match_rules(roll: tuple[int, ...]) -> None:
    assert score_roll_cached(roll) == tuple(score_all(roll).values())


@pytest.mark.unit
def test_cached_scores_ignore_order() -> None:
    assert score_roll_cached([6, 1, 6, 1, 6]) == score_roll_cached([1, 1, 6, 6, 6])


@pytest.mark.unit
def test_score_roll_cached_validates() -> None:
    with pytest.raises(InvalidRollError):
        score_roll_cached([1, 2, 3, 4, 0])


@pytest.mark.unit
def test_table_uses_given_rulebook() -> None:
    table = build_score_lookup_table(build_rulebook(RulesConfig(yahtzee=75)))
    row = table[(0, 0, 5, 0, 0, 0)]
    assert row[Category.YAHTZEE - 1] == 75
    assert row[Category.CHANCE - 1] == 15


@pytest.mark.unit
def test_score_rows_are_sorted_records() -> None:
    rows = score_rows(default_score_table())
    assert len(rows) == 252
    assert rows[0]["dice"] == [1, 1, 1, 1, 1]
    assert rows[-1]["dice"] == [6, 6, 6, 6, 6]
    assert rows[0]["scores"]["yahtzee"] == 50
    assert rows[0]["scores"]["ones"] == 5
    assert list(rows[0]["scores"]) == [c.name.lower() for c in Category]
