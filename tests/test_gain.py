import numpy as np
import pytest

from zlspectrum.gain import Gain


def _prepared(max_samples=256):
    gain = Gain()
    gain.prepare(48000.0, max_samples, 0.01)
    return gain


def test_defaults_are_unity():
    gain = Gain()
    assert gain.current_gain_linear == 1.0
    assert gain.target_gain_linear == 1.0
    assert gain.target_gain_decibels == pytest.approx(0.0)
    assert not gain.is_smoothing


def test_unity_gain_leaves_buffer_unchanged():
    gain = _prepared()
    buffer = [np.linspace(-1.0, 1.0, 64), np.ones(64)]
    expected = [channel.copy() for channel in buffer]
    gain.process(buffer, 64)
    for channel, original in zip(buffer, expected):
        np.testing.assert_array_equal(channel, original)


def test_decibel_target_round_trips():
    gain = _prepared()
    gain.set_gain_decibels(-9.0)
    assert gain.target_gain_decibels == pytest.approx(-9.0)
    assert gain.is_smoothing


def test_smoothed_ramp_then_constant_gain():
    gain = _prepared(256)
    gain.set_gain_linear(2.0)
    buffer = [np.ones(256), np.ones(256)]
    gain.process(buffer, 256)
    ramp = buffer[0]
    assert np.all(np.diff(ramp) >= 0.0)
    assert ramp[0] > 1.0
    np.testing.assert_array_equal(buffer[0], buffer[1])
    for _ in range(100):
        if not gain.is_smoothing:
            break
        gain.process([np.ones(256)], 256)
    assert not gain.is_smoothing
    assert gain.current_gain_linear == 2.0
    block = [np.full(32, 0.5)]
    gain.process(block, 32)
    np.testing.assert_allclose(block[0], np.ones(32))


def test_only_first_samples_are_processed():
    gain = _prepared()
    gain.set_gain_linear(0.5)
    for _ in range(200):
        gain.process([np.ones(256)], 256)
    channel = np.ones(16)
    gain.process([channel], 8)
    np.testing.assert_allclose(channel[:8], 0.5)
    np.testing.assert_array_equal(channel[8:], np.ones(8))


def test_bypass_advances_without_touching_buffer():
    gain = _prepared()
    gain.set_gain_linear(2.0)
    channel = np.ones(128)
    gain.process([channel], 128, bypass=True)
    np.testing.assert_array_equal(channel, np.ones(128))
    assert gain.current_gain_linear > 1.0


def test_reset_returns_to_unity():
    gain = _prepared()
    gain.set_gain_linear(3.0)
    gain.process([np.ones(64)], 64)
    gain.reset()
    assert gain.current_gain_linear == 1.0
    assert not gain.is_smoothing


def test_block_larger_than_prepared_raises():
    gain = _prepared(16)
    gain.set_gain_linear(2.0)
    with pytest.raises(ValueError):
        gain.process([np.ones(32)], 32)