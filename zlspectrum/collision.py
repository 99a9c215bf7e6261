"""Detection of spectral regions where two signals are both loud."""

from __future__ import annotations

import math

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

_GM_FLOOR = 0.01
_DECAY = 0.95


def softmax_average(data, k: float) -> float:
    """Average of ``data`` weighted by ``exp(k * x)``; NaN if the weights vanish."""
    values = np.asarray(data, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        weights = np.exp(values * k)
        weight_sum = weights.sum()
        if weight_sum < 1e-10:
            return math.nan
        return float((weights * values).sum() / weight_sum)


def _harmonic_means(windows: np.ndarray) -> np.ndarray:
    """Harmonic mean of each row; rows holding a value below 0.01 give 0."""
    too_small = (windows < _GM_FLOOR).any(axis=-1)
    safe = np.where(windows < _GM_FLOOR, 1.0, windows)
    means = windows.shape[-1] / (1.0 / safe).sum(axis=-1)
    return np.where(too_small, 0.0, means)


def harmonic_mean(data) -> float:
    """Harmonic mean of ``data``, or 0 if any value is below 0.01."""
    return float(_harmonic_means(np.asarray(data, dtype=float)))


def _smooth(ps: np.ndarray) -> np.ndarray:
    """Five-point harmonic-mean smoothing with shorter windows near the ends."""
    n = len(ps)
    smoothed = ps.copy()
    smoothed[1] = harmonic_mean(ps[0:3])
    if n >= 5:
        smoothed[2:n - 2] = _harmonic_means(sliding_window_view(ps, 5))
    smoothed[n - 2] = harmonic_mean(ps[n - 3:n])
    return smoothed


def create_gradient_ps(db0, db1, ps, final_ps, strength: float) -> None:
    """Update collision weights from two spectra in decibels.

    ``ps`` receives the current weights and ``final_ps`` the decaying peak of
    them; both are written in place.
    """
    db0 = np.asarray(db0, dtype=float)
    db1 = np.asarray(db1, dtype=float)
    if len(db0) < 4 or db0.shape != db1.shape:
        raise ValueError("spectra must have equal length of at least four points")

    avg0 = softmax_average(db0, 0.1)
    avg1 = softmax_average(db1, 0.1)
    if not (math.isfinite(avg0) and math.isfinite(avg1)) or avg0 < -120.0 or avg1 < -120.0:
        final_ps[:] = np.asarray(final_ps, dtype=float) * _DECAY
        return

    db_avg = 2.0 * softmax_average([avg0, avg1], 0.1)
    threshold = min(0.0, strength * db_avg)
    scale = 1.0 / (0.1 - threshold)

    current = _smooth((np.minimum(db0, db1) - threshold) * scale)
    mean_p = current.mean()
    if mean_p > strength * strength:
        current = current * (0.1 / mean_p)
    current = np.clip(current, 0.1, 1.0) - 0.1
    ps[:] = current
    final_ps[:] = np.maximum(np.asarray(final_ps, dtype=float) * _DECAY, current)