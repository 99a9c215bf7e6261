"""Real-valued FFT of power-of-two size and a periodic Hann window."""

from __future__ import annotations

import numpy as np


def cyclic_hanning_window(size: int) -> np.ndarray:
    """A periodic Hann window of ``size`` points (first point zero)."""
    return np.hanning(size + 1)[:size]


class FFTEngine:
    """Forward and unnormalised inverse real FFT of size ``2 ** order``."""

    def __init__(self) -> None:
        self._size = 0

    def set_order(self, order: int) -> None:
        if order < 0:
            raise ValueError("order must not be negative")
        self._size = 1 << order

    @property
    def size(self) -> int:
        return self._size

    def _require_order(self) -> None:
        if self._size == 0:
            raise RuntimeError("set_order must be called first")

    def _input(self, data) -> np.ndarray:
        self._require_order()
        samples = np.asarray(data, dtype=float)
        if len(samples) < self._size:
            raise ValueError(f"expected at least {self._size} samples, got {len(samples)}")
        return samples[:self._size]

    def forward(self, data) -> np.ndarray:
        """Return the ``size // 2 + 1`` complex bins of the first ``size`` samples."""
        return np.fft.rfft(self._input(data))

    def backward(self, spectrum) -> np.ndarray:
        """Inverse transform without the ``1 / size`` normalisation."""
        self._require_order()
        bins = np.asarray(spectrum, dtype=complex)
        expected = self._size // 2 + 1
        if len(bins) < expected:
            raise ValueError(f"expected at least {expected} bins, got {len(bins)}")
        return np.fft.irfft(bins[:expected], n=self._size) * self._size

    def forward_magnitude(self, data) -> np.ndarray:
        """Magnitudes of the forward transform."""
        return np.abs(self.forward(data))