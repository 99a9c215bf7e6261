"""Conversions between linear gain and decibels."""

from __future__ import annotations

import numpy as np

_GAIN_FLOOR = 1e-12
_SQUARE_GAIN_FLOOR = 1e-24


def _unwrap(result: np.ndarray):
    """Return a plain float for scalar results, the array otherwise."""
    return float(result) if np.ndim(result) == 0 else result


def decibels_to_gain(value):
    """Convert decibels to a linear gain factor."""
    return _unwrap(np.power(10.0, np.asarray(value, dtype=float) * 0.05))


def gain_to_decibels(value):
    """Convert a linear gain to decibels, flooring the gain at 1e-12."""
    clipped = np.maximum(np.asarray(value, dtype=float), _GAIN_FLOOR)
    return _unwrap(20.0 * np.log10(clipped))


def square_gain_to_decibels(value):
    """Convert a squared (power) gain to decibels, flooring it at 1e-24."""
    clipped = np.maximum(np.asarray(value, dtype=float), _SQUARE_GAIN_FLOOR)
    return _unwrap(10.0 * np.log10(clipped))