"""In-place conversion between left/right and mid/side signals."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

_SQRT2_OVER_2 = math.sqrt(2.0) / 2.0
_SQRT2 = math.sqrt(2.0)


class GainMode(Enum):
    """Where the factor of two is applied in the mid/side transform."""

    PRE = auto()
    AVG = auto()
    POST = auto()


def split(left: np.ndarray, right: np.ndarray, mode: GainMode = GainMode.PRE) -> None:
    """Turn left/right arrays into mid/side, in place."""
    if mode is GainMode.PRE:
        left[:] = 0.5 * (left + right)
        right[:] = left - right
    elif mode is GainMode.AVG:
        left[:] = _SQRT2_OVER_2 * (left + right)
        right[:] = left - _SQRT2 * right
    else:
        left[:] = left + right
        right[:] = left - 2.0 * right


def combine(left: np.ndarray, right: np.ndarray, mode: GainMode = GainMode.PRE) -> None:
    """Turn mid/side arrays back into left/right, in place."""
    if mode is GainMode.PRE:
        left[:] = left + right
        right[:] = left - 2.0 * right
    elif mode is GainMode.AVG:
        left[:] = _SQRT2_OVER_2 * (left + right)
        right[:] = left - _SQRT2 * right
    else:
        left[:] = 0.5 * (left + right)
        right[:] = left - right