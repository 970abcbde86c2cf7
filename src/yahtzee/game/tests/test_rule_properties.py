from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from helpers.dice_strategies import faces, rolls
from yahtzee.game.categories import DEFAULT_RULEBOOK, Category, score_all
from yahtzee.game.rules import FaceValueSum, evaluate

FLAT_SCORES = {
    Category.FULL_HOUSE: 25,
    Category.SMALL_STRAIGHT: 30,
    Category.LARGE_STRAIGHT: 40,
    Category.YAHTZEE: 50,
}


@pytest.mark.unit
@given(rolls)
def test_scores_are_non_negative_ints(roll: list[int]) -> None:
    for score in score_all(roll).values():
        assert isinstance(score, int)
        assert score >= 0


@pytest.mark.unit
@given(rolls)
def test_flat_rules_pay_all_or_nothing(roll: list[int]) -> None:
    scores = score_all(roll)
    for category, flat in FLAT_SCORES.items():
        assert scores[category] in (0, flat)


@pytest.mark.unit
@given(rolls, st.randoms(use_true_random=False))
def test_scores_are_permutation_invariant(roll: list[int], rnd) -> None:
    shuffled = list(roll)
    rnd.shuffle(shuffled)
    assert score_all(roll) == score_all(shuffled)


@pytest.mark.unit
@given(rolls, faces)
def test_face_value_sum_counts_target(roll: list[int], face: int) -> None:
    rule = FaceValueSum(face)
    first = evaluate(rule, roll)
    assert first == face * roll.count(face)
    assert evaluate(rule, roll) == first


@pytest.mark.unit
@given(rolls)
def test_chance_is_sum(roll: list[int]) -> None:
    assert evaluate(DEFAULT_RULEBOOK[Category.CHANCE], roll) == sum(roll)


@pytest.mark.unit
@given(rolls)
def test_yahtzee_implies_kinds_but_not_full_house(roll: list[int]) -> None:
    scores = score_all(roll)
    if scores[Category.YAHTZEE]:
        assert scores[Category.FULL_HOUSE] == 0
        assert scores[Category.FOUR_OF_A_KIND] == sum(roll)
        assert scores[Category.THREE_OF_A_KIND] == sum(roll)


@pytest.mark.unit
@given(rolls)
def test_large_straight_implies_small(roll: list[int]) -> None:
    scores = score_all(roll)
    if scores[Category.LARGE_STRAIGHT]:
        assert scores[Category.SMALL_STRAIGHT] == 30
