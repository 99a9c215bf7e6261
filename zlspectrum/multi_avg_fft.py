"""Time-aligned, long-term averaged spectrum analysis of several signals."""

from __future__ import annotations

import threading
from collections.abc import Sequence

import numpy as np

from .decibels import square_gain_to_decibels
from .multi_fft import MultipleFFTBase


class MultipleAvgFFTBase(MultipleFFTBase):
    """Runs several FFT analyzers whose power spectra are averaged over time.

    Every :meth:`run` adds the latest window's power spectrum to a running
    sum; the levels reported are the mean over all runs since the last reset.
    """

    def __init__(self, fft_num: int, point_num: int, fft_order: int = 12) -> None:
        self._ms_power: list[np.ndarray] = [np.zeros(0) for _ in range(fft_num)]
        self._fft_counts: list[float] = [0.0] * fft_num
        super().__init__(fft_num, point_num, fft_order)

    def prepare(self, sample_rate: float, num_channels: Sequence[int]) -> None:
        """Size the FFT for ``sample_rate`` and allocate per-channel buffers."""
        super().prepare(sample_rate, num_channels)

    def reset(self) -> None:
        """Discard the accumulated average of every analyzer on its next run."""
        super().reset()

    def process(self, buffers, num_samples: int) -> None:
        """Queue ``num_samples`` samples of every enabled signal."""
        super().process(buffers, num_samples)

    @property
    def interplot_size(self) -> int:
        """Number of points in the output frequency grid."""
        return super().interplot_size

    @property
    def lock(self) -> threading.Lock:
        """Lock held while the analyzer is being prepared."""
        return super().lock

    @property
    def result_dbs(self) -> list[np.ndarray]:
        """Averaged, tilted levels of every analyzer on the output grid."""
        return super().result_dbs

    def set_on(self, idx: int, on: bool) -> None:
        """Enable or disable analyzer ``idx``."""
        super().set_on(idx, on)

    def set_frozen(self, idx: int, frozen: bool) -> None:
        """Mark analyzer ``idx`` as frozen."""
        super().set_frozen(idx, frozen)

    def set_tilt_slope(self, x: float) -> None:
        """Set the display tilt in dB per octave."""
        super().set_tilt_slope(x)

    def set_extra_tilt(self, x: float) -> None:
        """Set an additional tilt in dB per octave."""
        super().set_extra_tilt(x)

    def set_min_freq(self, min_freq: float) -> None:
        """Set the lowest frequency of the output grid."""
        super().set_min_freq(min_freq)

    def set_max_freq(self, max_freq: float) -> None:
        """Set the highest frequency of the output grid."""
        super().set_max_freq(max_freq)

    def run(self) -> bool:
        """Add the queued samples to the average; return whether the grid changed."""
        if self._fft.size == 0:
            return False
        to_update = False
        on_indices = [i for i in range(self._fft_num) if self._is_on[i]]

        num_ready = self._fifo.num_ready
        rng = self._fifo.prepare_to_read(num_ready)
        num_replace = self._fft.size - num_ready
        b1, b2 = rng.block_size1, rng.block_size2
        s1, s2 = rng.start_index1, rng.start_index2
        for i in on_indices:
            for circular, fifo_data in zip(self._circular_buffers[i], self._sample_fifos[i]):
                circular[:num_replace] = circular[num_ready:].copy()
                if b1 > 0:
                    circular[num_replace:num_replace + b1] = fifo_data[s1:s1 + b1]
                if b2 > 0:
                    circular[num_replace + b1:num_replace + b1 + b2] = fifo_data[s2:s2 + b2]
        self._fifo.finish_read(num_ready)

        if self._to_update_akima:
            self._to_update_akima = False
            self._prepare_akima()
            to_update = True

        bins = self._fft.size // 2 + 1
        starts, ends = self._seq_input_starts, self._seq_input_ends
        mask = self._reduced_pos > 0
        for i in on_indices:
            if self._to_reset[i] or len(self._ms_power[i]) != bins:
                self._to_reset[i] = False
                self._ms_power[i] = np.zeros(bins)
                self._fft_counts[i] = 0.0
            self._fft_counts[i] += 1.0
            for channel in self._circular_buffers[i]:
                self._ms_power[i] += self._fft.forward_magnitude(channel * self._window) ** 2

            akima = self._seq_akima[i]
            input_dbs = akima.ys
            avg_scale = 1.0 / self._fft_counts[i]
            cumulative = np.concatenate(([0.0], np.cumsum(self._ms_power[i])))
            with np.errstate(invalid="ignore", divide="ignore"):
                mean_square = (cumulative[ends] - cumulative[starts]) / (ends - starts)
            input_dbs[:] = np.asarray(square_gain_to_decibels(mean_square * avg_scale), dtype=float)

            akima.prepare()
            reduced_dbs = akima.eval(self._reduced_freqs)
            interplot = self._interplot_dbs[i]
            interplot[mask] = input_dbs[self._reduced_pos[mask]]
            interplot[~mask] = reduced_dbs

        update_tilt = self._to_update_tilt
        self._to_update_tilt = False
        if update_tilt or to_update:
            self._prepare_tilt()
        for i in on_indices:
            self._result_dbs[i][:] = self._interplot_dbs[i] + self._tilt_shift
        return to_update