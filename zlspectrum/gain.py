"""A gain stage with multiplicative smoothing."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .decibels import decibels_to_gain, gain_to_decibels
from .smoothing import SmoothedType, SmoothedValue


class Gain:
    """Applies a smoothed gain to multichannel buffers in place."""

    def __init__(self) -> None:
        self._gain = SmoothedValue(1.0, SmoothedType.FIX_MUL)
        self._gain_values = np.zeros(0)

    def reset(self) -> None:
        self._gain.set_current_and_target(1.0)

    def set_gain_linear(self, new_gain: float) -> None:
        self._gain.set_target(new_gain)

    def set_gain_decibels(self, new_gain_decibels: float) -> None:
        self.set_gain_linear(decibels_to_gain(new_gain_decibels))

    @property
    def target_gain_linear(self) -> float:
        return self._gain.target

    @property
    def target_gain_decibels(self) -> float:
        return gain_to_decibels(self.target_gain_linear)

    @property
    def current_gain_linear(self) -> float:
        return self._gain.current

    @property
    def current_gain_decibels(self) -> float:
        return gain_to_decibels(self.current_gain_linear)

    @property
    def is_smoothing(self) -> bool:
        return self._gain.is_smoothing

    def prepare(self, sample_rate: float, max_num_samples: int, ramp_length_in_seconds: float) -> None:
        """Set the smoothing rate and the largest block size."""
        self._gain.prepare(sample_rate, ramp_length_in_seconds)
        self._gain_values = np.zeros(max_num_samples)

    def process(self, buffer: Sequence[np.ndarray], num_samples: int, bypass: bool = False) -> None:
        """Multiply the first ``num_samples`` of every channel by the gain.

        With ``bypass`` the gain still advances but the buffer is left untouched.
        """
        if not self._gain.is_smoothing:
            if bypass or abs(self._gain.current - 1.0) < 1e-6:
                return
            for channel in buffer:
                channel[:num_samples] *= self._gain.current
            return
        if num_samples > len(self._gain_values):
            raise ValueError(
                f"block of {num_samples} samples exceeds prepared maximum of {len(self._gain_values)}"
            )
        ramp = self._gain_values[:num_samples]
        for idx in range(num_samples):
            ramp[idx] = self._gain.get_next()
        if bypass:
            return
        for channel in buffer:
            channel[:num_samples] *= ramp