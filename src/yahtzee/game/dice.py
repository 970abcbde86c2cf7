# src/yahtzee/game/dice.py
"""Dice-multiset helpers shared by every scoring rule.

Rolls come in as plain sequences from the caller; :func:`validate_roll` turns
them into an immutable tuple once, and the remaining helpers assume that
shape. Face counting runs through a small Numba kernel so the lookup table
and the rules agree on one canonical ``(c1, …, c6)`` key.
"""

from __future__ import annotations

from collections import Counter
from numbers import Integral

import numba as nb
import numpy as np

from yahtzee.errors import InvalidRollError
from yahtzee.utils.types import DiceRoll, Int64Array1D, RollLike, SixFaceCounts

NUM_DICE = 5
MIN_FACE = 1
MAX_FACE = 6
FACES = range(MIN_FACE, MAX_FACE + 1)


def validate_roll(roll: RollLike) -> DiceRoll:
    """Return *roll* as a tuple of ints after checking its shape.

    Inputs
    ------
    roll (Sequence[int]):
        Caller-supplied dice faces; lists, tuples and NumPy arrays all work.

    Returns
    -------
    DiceRoll:
        The same faces, in the same order, as plain ``int`` values.

    Raises
    ------
    InvalidRollError:
        If the roll does not hold exactly five integers in ``1``–``6``.
    """
    try:
        faces = tuple(roll)
    except TypeError as exc:
        raise InvalidRollError(f"a roll must be a sequence of dice, got {roll!r}") from exc
    if len(faces) != NUM_DICE:
        raise InvalidRollError(f"a roll needs exactly {NUM_DICE} dice, got {len(faces)}")
    for f in faces:
        if isinstance(f, bool) or not isinstance(f, Integral):
            raise InvalidRollError(f"dice faces must be integers, got {f!r}")
        if not MIN_FACE <= f <= MAX_FACE:
            raise InvalidRollError(
                f"dice faces must be between {MIN_FACE} and {MAX_FACE}, got {f}"
            )
    return tuple(int(f) for f in faces)


def dice_sum(roll: DiceRoll) -> int:
    """Sum of all dice."""
    return sum(roll)


def frequency_profile(roll: DiceRoll) -> dict[int, int]:
    """Map each face present to its count, in first-seen order.

    ``[5, 2, 1, 2, 5]`` gives ``{5: 2, 2: 2, 1: 1}``.
    """
    return dict(Counter(roll))


def count_value(roll: DiceRoll, target: int) -> int:
    """Number of dice in *roll* showing *target*."""
    return sum(1 for d in roll if d == target)


@nb.njit(cache=True)
def _faces_to_counts_nb(faces: Int64Array1D) -> SixFaceCounts:
    """Count occurrences of each face value.

    Inputs
    ------
    faces (np.ndarray):
        1-D array of dice faces.

    Returns
    -------
    SixFaceCounts:
        Tuple of counts for faces one through six.
    """
    out = np.zeros(6, dtype=np.int64)
    for v in faces:
        out[v - 1] += 1
    return (int(out[0]), int(out[1]), int(out[2]), int(out[3]), int(out[4]), int(out[5]))


def face_counts(roll: RollLike) -> SixFaceCounts:
    """Validate *roll* and return its six-face counts tuple.

    The tuple is hashable and identical for every permutation of the roll,
    which makes it the key of :mod:`yahtzee.game.scoring_lookup`.
    """
    faces = validate_roll(roll)
    return _faces_to_counts_nb(np.asarray(faces, dtype=np.int64))


def counts_to_roll(counts: SixFaceCounts) -> DiceRoll:
    """Expand a counts tuple back into a sorted roll."""
    return tuple(face for face, n in zip(FACES, counts) for _ in range(n))


__all__ = [
    "NUM_DICE",
    "FACES",
    "validate_roll",
    "dice_sum",
    "frequency_profile",
    "count_value",
    "face_counts",
    "counts_to_roll",
]
