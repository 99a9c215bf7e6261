import pytest

from zlspectrum.smoothing import SmoothedType, SmoothedValue


def _run(value, steps):
    return [value.get_next() for _ in range(steps)]


def test_initial_value_is_current_and_target():
    value = SmoothedValue(0.7)
    assert value.current == 0.7
    assert value.target == 0.7
    assert not value.is_smoothing


def test_not_smoothing_returns_current():
    value = SmoothedValue(0.3)
    assert value.get_next() == 0.3


def test_linear_reaches_target_after_ramp():
    value = SmoothedValue(0.0, SmoothedType.LIN)
    value.prepare(100.0, 0.1)
    value.set_target(1.0)
    assert value.is_smoothing
    values = _run(value, 10)
    assert values[-1] == pytest.approx(1.0)
    assert not value.is_smoothing
    assert all(b > a for a, b in zip(values, values[1:]))
    steps = [b - a for a, b in zip(values, values[1:])]
    assert all(s == pytest.approx(steps[0]) for s in steps)


def test_linear_without_prepare_does_not_move():
    value = SmoothedValue(0.0, SmoothedType.LIN)
    value.set_target(1.0)
    assert not value.is_smoothing
    assert value.get_next() == 0.0
    assert value.target == 1.0


def test_multiplicative_reaches_target_with_constant_ratio():
    value = SmoothedValue(1.0, SmoothedType.MUL)
    value.prepare(10.0, 1.0)
    value.set_target(8.0)
    values = [1.0] + _run(value, 10)
    assert values[-1] == pytest.approx(8.0)
    ratios = [b / a for a, b in zip(values, values[1:])]
    assert all(r == pytest.approx(ratios[0]) for r in ratios)
    assert not value.is_smoothing


def test_fixed_linear_clamps_at_target():
    value = SmoothedValue(0.0, SmoothedType.FIX_LIN)
    value.prepare(10.0, 1.0)
    value.set_target(0.35)
    values = _run(value, 10)
    assert values[-1] == 0.35
    assert max(values) == 0.35
    assert not value.is_smoothing


def test_fixed_linear_decreasing_clamps_at_target():
    value = SmoothedValue(1.0, SmoothedType.FIX_LIN)
    value.prepare(10.0, 1.0)
    value.set_target(0.55)
    values = _run(value, 10)
    assert values[-1] == 0.55
    assert min(values) == 0.55
    assert all(b <= a for a, b in zip(values, values[1:]))


def test_fixed_multiplicative_up_and_down():
    value = SmoothedValue(1.0, SmoothedType.FIX_MUL)
    value.prepare(10.0, 1.0)
    value.set_target(3.0)
    _run(value, 40)
    assert value.current == 3.0
    assert not value.is_smoothing
    value.set_target(0.5)
    values = _run(value, 40)
    assert values[-1] == 0.5
    assert min(values) == 0.5


def test_tiny_target_change_does_not_smooth():
    value = SmoothedValue(1.0, SmoothedType.LIN)
    value.prepare(100.0, 0.1)
    value.set_target(1.0 + 1e-12)
    assert not value.is_smoothing


def test_set_current_and_target_stops_smoothing():
    value = SmoothedValue(0.0, SmoothedType.LIN)
    value.prepare(100.0, 0.1)
    value.set_target(1.0)
    value.get_next()
    value.set_current_and_target(0.25)
    assert not value.is_smoothing
    assert value.get_next() == 0.25