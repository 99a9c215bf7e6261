"""Values that ramp towards a target one sample at a time."""

from __future__ import annotations

import math
from enum import Enum, auto


class SmoothedType(Enum):
    """How a smoothed value moves towards its target."""

    LIN = auto()
    """Linear ramp over a fixed number of samples."""
    MUL = auto()
    """Exponential ramp over a fixed number of samples."""
    FIX_LIN = auto()
    """Linear ramp at a fixed rate, clamped at the target."""
    FIX_MUL = auto()
    """Multiplicative ramp at a fixed rate, clamped at the target."""


class SmoothedValue:
    """A value that is smoothed towards a target."""

    def __init__(self, value: float = 0.0, kind: SmoothedType = SmoothedType.LIN) -> None:
        self.kind = kind
        self._inc = 0.0
        self._increase_inc = 0.0
        self._decrease_inc = 0.0
        self._max_count = 0
        self._max_count_inverse = 0.0
        self._is_increasing = False
        self._current = 0.0
        self._target = 0.0
        self._count = 0
        self.set_current_and_target(value)

    def prepare(self, sample_rate: float, ramp_length_in_seconds: float) -> None:
        """Set the ramp length (or rate, for the fixed types)."""
        steps = sample_rate * ramp_length_in_seconds
        if self.kind in (SmoothedType.LIN, SmoothedType.MUL):
            self._max_count = int(steps)
            self._max_count_inverse = 1.0 / self._max_count if self._max_count else math.inf
        elif self.kind is SmoothedType.FIX_LIN:
            self._inc = 1.0 / steps
            self._increase_inc = self._inc
            self._decrease_inc = -self._inc
        else:
            self._inc = 2.0 ** (1.0 / steps)
            self._increase_inc = self._inc
            self._decrease_inc = 1.0 / self._inc
        self.set_target(self._target)

    def set_target(self, x: float) -> None:
        """Start moving towards a new target."""
        self._target = x
        if abs(self._current - self._target) < 1e-10:
            self._count = 0
            return
        if self.kind in (SmoothedType.LIN, SmoothedType.MUL):
            if self._max_count == 0:
                self._count = 0
                return
            if self.kind is SmoothedType.LIN:
                self._inc = (self._target - self._current) * self._max_count_inverse
            else:
                self._inc = math.exp(math.log(self._target / self._current) * self._max_count_inverse)
            self._count = self._max_count
        else:
            self._count = 1
            self._is_increasing = self._target > self._current

    def set_current_and_target(self, x: float) -> None:
        """Jump to a value and stop smoothing."""
        self._current = x
        self._target = x
        self._count = 0

    @property
    def current(self) -> float:
        return self._current

    @property
    def target(self) -> float:
        return self._target

    @property
    def is_smoothing(self) -> bool:
        return self._count > 0

    def get_next(self) -> float:
        """Advance one step and return the new current value."""
        if self._count == 0:
            return self._current
        if self.kind is SmoothedType.LIN:
            self._current += self._inc
            self._count -= 1
        elif self.kind is SmoothedType.MUL:
            self._current *= self._inc
            self._count -= 1
        else:
            multiplicative = self.kind is SmoothedType.FIX_MUL
            step = self._increase_inc if self._is_increasing else self._decrease_inc
            if multiplicative:
                self._current *= step
            else:
                self._current += step
            overshoot = (
                self._current > self._target if self._is_increasing else self._current < self._target
            )
            if overshoot:
                self._current = self._target
                self._count = 0
        return self._current