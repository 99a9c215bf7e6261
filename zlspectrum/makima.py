"""Modified Akima spline interpolation over increasing abscissae."""

from __future__ import annotations

import numpy as np


def _h00(t):
    return (1.0 + 2.0 * t) * (1.0 - t) * (1.0 - t)


def _h10(t):
    return t * (1.0 - t) * (1.0 - t)


def _h01(t):
    return t * t * (3.0 - 2.0 * t)


def _h11(t):
    return t * t * (t - 1.0)


class SeqMakima:
    """Modified Akima spline with fixed end derivatives.

    ``xs`` and ``ys`` are kept as the arrays given; after changing ``ys`` in
    place, call :meth:`prepare` again before evaluating.
    """

    def __init__(self, xs, ys, left_derivative: float = 0.0, right_derivative: float = 0.0) -> None:
        self.xs = np.asarray(xs, dtype=float)
        self.ys = np.asarray(ys, dtype=float)
        if self.xs.ndim != 1 or self.xs.shape != self.ys.shape:
            raise ValueError("xs and ys must be one-dimensional and of equal length")
        if len(self.xs) < 4:
            raise ValueError("at least four input points are required")
        self.left_derivative = left_derivative
        self.right_derivative = right_derivative
        self.derivatives = np.zeros(len(self.xs))

    def prepare(self) -> None:
        """Recompute the derivatives from the current input points."""
        deltas = np.diff(self.ys) / np.diff(self.xs)
        left_delta = 2.0 * deltas[0] - deltas[1]
        right_delta = 2.0 * deltas[-1] - deltas[-2]
        ext = np.concatenate(([left_delta], deltas, [right_delta]))
        d0, d1, d2, d3 = ext[:-3], ext[1:-2], ext[2:-1], ext[3:]
        w1 = np.abs(d3 - d2) + np.abs(d3 + d2) * 0.5
        w2 = np.abs(d1 - d0) + np.abs(d1 + d0) * 0.5
        total = w1 + w2
        with np.errstate(invalid="ignore", divide="ignore"):
            w = np.where(total > 0.0, w1 / np.where(total > 0.0, total, 1.0), 0.5)
        self.derivatives[0] = self.left_derivative
        self.derivatives[-1] = self.right_derivative
        self.derivatives[1:-1] = w * d1 + (1.0 - w) * d2

    def eval(self, x) -> np.ndarray:
        """Evaluate the spline at increasing points ``x``."""
        x = np.asarray(x, dtype=float)
        n_out = len(x)
        y = np.empty(n_out)
        if n_out == 0:
            return y
        xs, ys = self.xs, self.ys

        left = x <= xs[0]
        start = n_out if left.all() else int(np.argmin(left))
        tail = (x >= xs[-1])[start + 1:][::-1]
        trailing = len(tail) if tail.all() else int(np.argmin(tail))
        end = n_out - 1 - trailing

        y[:start] = ys[0]
        y[end + 1:] = ys[-1]

        mid = x[start:end + 1]
        if len(mid):
            pos = np.clip(np.searchsorted(xs, mid, side="right") - 1, 0, len(xs) - 2)
            x0, x1 = xs[pos], xs[pos + 1]
            width = x1 - x0
            t = (mid - x0) / width
            y[start:end + 1] = (
                _h00(t) * ys[pos]
                + _h10(t) * width * self.derivatives[pos]
                + _h01(t) * ys[pos + 1]
                + _h11(t) * width * self.derivatives[pos + 1]
            )
        return y