"""Shared type aliases for the Yahtzee scoring project.

``Int64Array1D`` mirrors the NumPy arrays handed to the Numba kernels and is,
by convention, one-dimensional.
"""

from __future__ import annotations

from typing import Sequence, Tuple, TypeAlias

import numpy as np
import numpy.typing as npt

SixFaceCounts: TypeAlias = Tuple[int, int, int, int, int, int]  # counts for faces 1-6
DiceRoll: TypeAlias = Tuple[int, ...]  # validated five-dice roll
RollLike: TypeAlias = Sequence[int]  # caller-supplied roll, not yet validated
Score: TypeAlias = int
Int64Array1D: TypeAlias = npt.NDArray[np.int64]  # 1-D array of 64-bit ints
