import numpy as np
import pytest

from zlspectrum.collision import create_gradient_ps, harmonic_mean, softmax_average


def test_harmonic_mean_of_equal_values():
    assert harmonic_mean([2.0, 2.0, 2.0]) == pytest.approx(2.0)


def test_harmonic_mean_zero_when_value_too_small():
    assert harmonic_mean([1.0, 0.001, 1.0]) == 0.0


def test_harmonic_mean_not_above_arithmetic_mean():
    data = [0.5, 2.0, 3.0, 0.7]
    assert harmonic_mean(data) <= np.mean(data)
    assert harmonic_mean(data) >= min(data)


def test_softmax_average_of_constant():
    assert softmax_average([-12.0] * 5, 0.1) == pytest.approx(-12.0)


def test_softmax_average_with_zero_k_is_mean():
    data = [-30.0, -10.0, -20.0]
    assert softmax_average(data, 0.0) == pytest.approx(np.mean(data))


def test_softmax_average_leans_to_large_values():
    data = [-40.0, 0.0]
    assert softmax_average(data, 0.1) > np.mean(data)


def test_softmax_average_nan_for_vanishing_weights():
    result = softmax_average([-2000.0, -3000.0], 0.1)
    assert str(float(result)) == "nan"


def test_quiet_input_only_decays_final():
    n = 16
    db = np.full(n, -200.0)
    ps = np.full(n, 0.3)
    final_ps = np.full(n, 0.5)
    create_gradient_ps(db, db, ps, final_ps, 0.5)
    np.testing.assert_allclose(ps, 0.3)
    np.testing.assert_allclose(final_ps, 0.5 * 0.95)


def test_loud_input_gives_bounded_weights():
    n = 32
    rng = np.random.default_rng(3)
    db0 = rng.uniform(-40.0, 0.0, n)
    db1 = rng.uniform(-40.0, 0.0, n)
    ps = np.zeros(n)
    final_ps = np.zeros(n)
    create_gradient_ps(db0, db1, ps, final_ps, 0.5)
    assert np.all(ps >= 0.0) and np.all(ps <= 0.9 + 1e-12)
    np.testing.assert_allclose(final_ps, np.maximum(0.0, ps))


def test_final_never_drops_faster_than_decay():
    n = 20
    db0 = np.linspace(-30.0, -5.0, n)
    db1 = np.linspace(-5.0, -30.0, n)
    ps = np.zeros(n)
    final_ps = np.full(n, 0.8)
    previous = final_ps.copy()
    create_gradient_ps(db0, db1, ps, final_ps, 0.3)
    np.testing.assert_allclose(final_ps, np.maximum(previous * 0.95, ps))
    assert (final_ps - previous * 0.95).min() >= -1e-12
    assert (final_ps - ps).min() >= -1e-12


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        create_gradient_ps(np.zeros(8), np.zeros(9), np.zeros(8), np.zeros(8), 0.5)


def test_too_short_raises():
    with pytest.raises(ValueError):
        create_gradient_ps(np.zeros(3), np.zeros(3), np.zeros(3), np.zeros(3), 0.5)