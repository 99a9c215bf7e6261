"""Spectrum analyzer that turns levels into drawing coordinates."""

from __future__ import annotations

import numpy as np

from .multi_fft import MultipleFFTBase


class MultipleFFTAnalyzer(MultipleFFTBase):
    """A synchronised multi-signal analyzer that also builds path coordinates."""

    def create_path_xs(self, width: float) -> np.ndarray:
        """Horizontal positions of the grid points, log-scaled onto ``width``."""
        return self._interplot_freqs_p * width

    def create_path_ys(self, height: float, min_db: float = -72.0,
                       max_db: float = 0.0) -> list[np.ndarray | None]:
        """Vertical positions of each enabled signal; ``None`` for disabled ones.

        ``max_db`` maps to 0 and ``min_db`` maps to ``height``.
        """
        scale = height / min_db
        ys: list[np.ndarray | None] = []
        for i in range(self._fft_num):
            if not self._is_on[i]:
                ys.append(None)
                continue
            db = self._result_dbs[i]
            if abs(max_db) > 0.01:
                ys.append((db - max_db) * scale)
            else:
                ys.append(db * scale)
        return ys