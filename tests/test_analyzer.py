import numpy as np

from zlspectrum.analyzer import MultipleFFTAnalyzer

SAMPLE_RATE = 48000.0
SIZE = 1024


def _sine(freq, n=SIZE):
    t = np.arange(n) / SAMPLE_RATE
    return np.sin(2 * np.pi * freq * t)


def _run_with_sine(freq=1000.0):
    analyzer = MultipleFFTAnalyzer(2, 200, fft_order=10)
    analyzer.prepare(SAMPLE_RATE, [1, 1])
    analyzer.set_on(0, True)
    analyzer.set_tilt_slope(0.0)
    analyzer.process([[_sine(freq)], [np.zeros(SIZE)]], SIZE)
    analyzer.run()
    return analyzer


def test_path_xs_start_at_zero_and_increase():
    analyzer = _run_with_sine()
    xs = analyzer.create_path_xs(100.0)
    assert len(xs) == analyzer.interplot_size
    assert abs(xs[0]) < 1e-9
    assert np.all(np.diff(xs) > 0)


def test_path_xs_scale_with_width():
    analyzer = _run_with_sine()
    np.testing.assert_allclose(analyzer.create_path_xs(200.0), 2 * analyzer.create_path_xs(100.0))


def test_path_ys_none_for_disabled_signal():
    analyzer = _run_with_sine()
    ys = analyzer.create_path_ys(300.0)
    assert ys[1] is None
    assert len(ys[0]) == analyzer.interplot_size


def test_path_ys_scale_with_height():
    analyzer = _run_with_sine()
    small = analyzer.create_path_ys(100.0)[0]
    large = analyzer.create_path_ys(200.0)[0]
    np.testing.assert_allclose(large, 2 * small)


def test_path_ys_max_db_shifts_uniformly():
    analyzer = _run_with_sine()
    base = analyzer.create_path_ys(300.0, -72.0, 0.0)[0]
    shifted = analyzer.create_path_ys(300.0, -72.0, -6.0)[0]
    diff = shifted - base
    assert np.ptp(diff) < 1e-9
    assert diff[0] < 0


def test_peak_lies_at_sine_frequency():
    analyzer = _run_with_sine(1000.0)
    xs = analyzer.create_path_xs(1.0)
    ys = analyzer.create_path_ys(1.0)[0]
    # louder levels sit closer to the top, i.e. smaller y
    peak_p = xs[int(np.argmin(ys))]
    peak_freq = 10.0 * (22000.0 / 10.0) ** peak_p
    assert 800.0 < peak_freq < 1250.0