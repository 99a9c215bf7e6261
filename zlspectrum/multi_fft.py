"""Time-aligned spectrum analysis of several signals at once."""

from __future__ import annotations

import math
import threading
from collections.abc import Sequence
from enum import Enum, auto

import numpy as np

from .decibels import square_gain_to_decibels
from .fft import FFTEngine, cyclic_hanning_window
from .fifo import AbstractFifo
from .makima import SeqMakima

MIN_DB = -256.0


def _round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)


class FFTStereoMode(Enum):
    """Which part of a two-channel signal is analysed."""

    STEREO = auto()
    LEFT = auto()
    RIGHT = auto()
    MID = auto()
    SIDE = auto()


class MultipleFFTBase:
    """Runs several FFT analyzers on signals that stay synchronised in time.

    Samples are queued with :meth:`process`; :meth:`run` transforms the latest
    window of each enabled signal, smooths the levels with a decay, interpolates
    them onto a logarithmic frequency grid and applies a tilt.
    """

    def __init__(self, fft_num: int, point_num: int, fft_order: int = 12) -> None:
        if fft_num < 1:
            raise ValueError("fft_num must be at least one")
        if point_num < 2:
            raise ValueError("point_num must be at least two")
        self._fft_num = fft_num
        self._point_num = point_num
        self._default_fft_order = fft_order
        self._lock = threading.Lock()

        self._sample_fifos: list[list[np.ndarray]] = [[] for _ in range(fft_num)]
        self._circular_buffers: list[list[np.ndarray]] = [[] for _ in range(fft_num)]
        self._fifo = AbstractFifo(0)

        self._sample_rate = 48000.0
        self._min_freq = 10.0
        self._max_freq = 22000.0
        self._to_update_akima = True
        self._seq_input_freqs = np.zeros(0)
        self._seq_input_starts = np.zeros(0, dtype=int)
        self._seq_input_ends = np.zeros(0, dtype=int)
        self._seq_akima: list[SeqMakima | None] = [None] * fft_num

        self._interplot_freqs = np.zeros(0)
        self._interplot_freqs_p = np.zeros(0)
        self._reduced_freqs = np.zeros(0)
        self._reduced_pos = np.zeros(0, dtype=int)
        self._interplot_dbs = [np.zeros(0) for _ in range(fft_num)]
        self._result_dbs = [np.zeros(0) for _ in range(fft_num)]

        self._refresh_rate = 60.0
        self._tilt_slope = 4.5
        self._decay_rates = [0.95] * fft_num
        self._actual_decay_rates = [0.95] * fft_num
        self._extra_tilt = 0.0
        self._extra_speed = 1.0

        self._tilt_shift = np.zeros(0)
        self._to_update_tilt = True

        self._fft = FFTEngine()
        self._window = np.zeros(0)

        self._to_reset = [True] * fft_num
        self._is_on = [False] * fft_num
        self._is_frozen = [False] * fft_num

        self.reset()
        self._update_actual_decay_rate()

    def prepare(self, sample_rate: float, num_channels: Sequence[int]) -> None:
        """Size the buffers for a sample rate and per-signal channel counts."""
        if len(num_channels) != self._fft_num:
            raise ValueError(f"expected {self._fft_num} channel counts, got {len(num_channels)}")
        with self._lock:
            self._sample_rate = float(sample_rate)
            if sample_rate <= 50000:
                extra = 0
            elif sample_rate <= 100000:
                extra = 1
            elif sample_rate <= 200000:
                extra = 2
            else:
                extra = 3
            self._set_order(self._default_fft_order + extra, num_channels)
            self.reset()
            self._to_update_akima = True

    def reset(self) -> None:
        """Make every analyzer drop its smoothed levels on the next run."""
        self._to_reset = [True] * self._fft_num

    def process(self, buffers: Sequence[Sequence[np.ndarray]], num_samples: int) -> None:
        """Queue samples; ``buffers[i]`` holds the channels of signal ``i``."""
        free_space = self._fifo.num_free
        for i in range(self._fft_num):
            if self._is_on[i]:
                free_space = min(free_space, num_samples)
        if free_space <= 0:
            return
        rng = self._fifo.prepare_to_write(free_space)
        b1, b2 = rng.block_size1, rng.block_size2
        s1, s2 = rng.start_index1, rng.start_index2
        for i in range(self._fft_num):
            if not self._is_on[i]:
                continue
            for target, source in zip(self._sample_fifos[i], buffers[i]):
                source = np.asarray(source, dtype=float)
                if b1 > 0:
                    target[s1:s1 + b1] = source[:b1]
                if b2 > 0:
                    target[s2:s2 + b2] = source[b1:b1 + b2]
        self._fifo.finish_write(free_space)

    @property
    def interplot_size(self) -> int:
        return len(self._interplot_freqs)

    def _signal_power(self, channels: list[np.ndarray], stereo_mode: FFTStereoMode) -> np.ndarray:
        bins = self._fft.size // 2 + 1
        if len(channels) != 2 or stereo_mode is FFTStereoMode.STEREO:
            power = np.zeros(bins)
            for channel in channels:
                power += self._fft.forward_magnitude(channel * self._window) ** 2
            return power
        if stereo_mode is FFTStereoMode.LEFT:
            signal = channels[0]
        elif stereo_mode is FFTStereoMode.RIGHT:
            signal = channels[1]
        elif stereo_mode is FFTStereoMode.MID:
            signal = channels[0] + channels[1]
        else:
            signal = channels[0] - channels[1]
        return self._fft.forward_magnitude(signal * self._window) ** 2

    def run(self, stereo_mode: FFTStereoMode = FFTStereoMode.STEREO) -> bool:
        """Analyse the queued samples; return whether the frequency grid changed."""
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

        starts, ends = self._seq_input_starts, self._seq_input_ends
        mask = self._reduced_pos > 0
        for i in on_indices:
            power = self._signal_power(self._circular_buffers[i], stereo_mode)
            decay = 1.0 if self._is_frozen[i] else self._actual_decay_rates[i]
            akima = self._seq_akima[i]
            input_dbs = akima.ys
            if self._to_reset[i]:
                self._to_reset[i] = False
                input_dbs.fill(MIN_DB)
            cumulative = np.concatenate(([0.0], np.cumsum(power)))
            with np.errstate(invalid="ignore", divide="ignore"):
                mean_square = (cumulative[ends] - cumulative[starts]) / (ends - starts)
            current = np.asarray(square_gain_to_decibels(mean_square), dtype=float)
            input_dbs[:] = np.where(current < input_dbs,
                                    input_dbs * decay + current * (1.0 - decay),
                                    current)
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

    def set_on(self, idx: int, on: bool) -> None:
        self._is_on[idx] = on

    def set_frozen(self, idx: int, frozen: bool) -> None:
        self._is_frozen[idx] = frozen

    def set_decay_rate(self, idx: int, x: float) -> None:
        self._decay_rates[idx] = x
        self._update_actual_decay_rate()

    def set_refresh_rate(self, x: float) -> None:
        self._refresh_rate = x
        self._update_actual_decay_rate()

    def set_tilt_slope(self, x: float) -> None:
        self._tilt_slope = x
        self._to_update_tilt = True

    def set_extra_tilt(self, x: float) -> None:
        self._extra_tilt = x
        self._to_update_tilt = True

    def set_extra_speed(self, x: float) -> None:
        self._extra_speed = x
        self._update_actual_decay_rate()

    def set_min_freq(self, min_freq: float) -> None:
        self._min_freq = min_freq
        self._to_update_akima = True

    def set_max_freq(self, max_freq: float) -> None:
        self._max_freq = max_freq
        self._to_update_akima = True

    @property
    def lock(self) -> threading.Lock:
        """The lock held while the analyzer is being prepared."""
        return self._lock

    @property
    def result_dbs(self) -> list[np.ndarray]:
        """Tilted levels in decibels of each signal on the interpolation grid."""
        return self._result_dbs

    def _prepare_akima(self) -> None:
        sample_rate = self._sample_rate
        max_freq = min(self._max_freq, sample_rate * 0.5)
        min_freq = min(self._min_freq, max_freq * 0.5)
        fft_size = self._fft.size

        force_last_range = False
        freq_delta = sample_rate / fft_size
        freq_mul = (max_freq / min_freq) ** (2.0 / self._point_num)
        freq = min_freq * math.sqrt(freq_mul)
        starts = [0]
        ends = [max(_round_half_away(freq / freq_delta), 1)]
        limit = fft_size // 2
        for _ in range(self._point_num // 2 + 1):
            freq *= freq_mul
            new_index = min(_round_half_away(freq / freq_delta), limit)
            if new_index > ends[-1]:
                starts.append(ends[-1])
                ends.append(new_index)
        if freq > sample_rate * 0.5:
            starts.append(limit + 1 - (ends[-1] - starts[-1]) // 2)
            ends.append(limit + 1)
            force_last_range = True
        self._seq_input_starts = np.array(starts, dtype=int)
        self._seq_input_ends = np.array(ends, dtype=int)

        half_delta = 0.5 * sample_rate / fft_size
        seq_freqs = (self._seq_input_starts + self._seq_input_ends - 1).astype(float) * half_delta
        if force_last_range:
            seq_freqs[-1] = 0.5 * sample_rate
        self._seq_input_freqs = seq_freqs
        self._seq_akima = [
            SeqMakima(seq_freqs, np.full(len(seq_freqs), MIN_DB), 0.0, 0.0)
            for _ in range(self._fft_num)
        ]

        freq = min_freq
        out_mul = (max_freq / min_freq) ** (1.1 / self._point_num)
        reduced_freqs: list[float] = []
        reduced_pos: list[int] = []
        interplot: list[float] = []
        for i in range(1, len(seq_freqs)):
            if freq >= seq_freqs[i]:
                continue
            if i != 1:
                interplot.append(freq)
                reduced_pos.append(i - 1)
                freq *= out_mul
            while freq < seq_freqs[i]:
                interplot.append(freq)
                reduced_freqs.append(freq)
                reduced_pos.append(0)
                freq *= out_mul
            freq = float(seq_freqs[i])
        if not interplot or abs(seq_freqs[-1] - interplot[-1]) > 1e-3:
            interplot.append(float(seq_freqs[-1]))
            reduced_pos.append(len(seq_freqs) - 1)

        self._reduced_freqs = np.array(reduced_freqs, dtype=float)
        self._reduced_pos = np.array(reduced_pos, dtype=int)
        self._interplot_freqs = np.array(interplot, dtype=float)
        scale = 1.0 / math.log(max_freq / min_freq)
        bias = math.log(min_freq) * scale
        self._interplot_freqs_p = np.log(self._interplot_freqs) * scale - bias

        n = len(interplot)
        self._interplot_dbs = [np.zeros(n) for _ in range(self._fft_num)]
        self._result_dbs = [np.full(n, MIN_DB) for _ in range(self._fft_num)]
        self._tilt_shift = np.zeros(n)
        self.reset()

    def _prepare_tilt(self) -> None:
        final_tilt = self._tilt_slope + self._extra_tilt
        max_freq = min(self._max_freq, self._sample_rate * 0.5)
        total_tilt = math.log2(max_freq / self._min_freq) * final_tilt
        self._tilt_shift[:] = (self._interplot_freqs_p - 0.5) * total_tilt

    def _set_order(self, fft_order: int, num_channels: Sequence[int]) -> None:
        self._fft.set_order(fft_order)
        fft_size = self._fft.size
        self._window = cyclic_hanning_window(fft_size) / fft_size
        self._fifo.set_capacity(fft_size)
        for i, count in enumerate(num_channels):
            self._sample_fifos[i] = [np.zeros(fft_size) for _ in range(count)]
            self._circular_buffers[i] = [np.zeros(fft_size) for _ in range(count)]

    def _update_actual_decay_rate(self) -> None:
        exponent = 23.4375 / self._refresh_rate
        self._actual_decay_rates = [
            math.pow(1.0 - (1.0 - rate) * self._extra_speed, exponent)
            for rate in self._decay_rates
        ]