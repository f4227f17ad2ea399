import math

import numpy as np
import pytest

from audiokit.spectrum import (
    SpectrumBars,
    map_range,
    resample_linear,
    samples_to_spectrum,
    split_channels,
    stereo_spectrum,
)

RATE = 48000


def _sine(frequency, count, amplitude=0.5):
    return [amplitude * math.sin(2 * math.pi * frequency * n / RATE) for n in range(count)]


def test_map_range_clamps_above():
    assert map_range(2.0, (0.0, 1.0), (0.0, 600.0)) == 600.0


def test_map_range_clamps_below():
    assert map_range(-1.0, (0.0, 1.0), (0.0, 600.0)) == 0.0


def test_map_range_midpoint():
    assert map_range(0.5, (0.0, 1.0), (0.0, 600.0)) == pytest.approx(300.0)


def test_split_channels_even_and_odd():
    left, right = split_channels([1, 2, 3, 4, 5])
    assert left == [1, 3, 5]
    assert right == [2, 4]


def test_resample_linear_identity():
    assert resample_linear([1.0, 2.0, 3.0], 3) == pytest.approx([1.0, 2.0, 3.0])


def test_resample_linear_keeps_endpoints_and_order():
    values = [0.0, 1.0, 4.0, 9.0]
    result = resample_linear(values, 17)
    assert len(result) == 17
    assert result[0] == pytest.approx(0.0)
    assert result[-1] == pytest.approx(9.0)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_resample_linear_short_inputs():
    assert resample_linear([], 5) == []
    assert resample_linear([1.0, 2.0], 0) == []
    assert resample_linear([7.0], 4) == [7.0]
    assert resample_linear([3.0, 8.0], 1) == [3.0]


def test_spectrum_of_silence_is_zero():
    result = samples_to_spectrum([0.0] * 1024, RATE)
    assert len(result) > 0
    assert np.all(result == 0.0)


def test_spectrum_is_linear_in_amplitude():
    quiet = samples_to_spectrum(_sine(6000, 1024, 0.25), RATE)
    loud = samples_to_spectrum(_sine(6000, 1024, 0.5), RATE)
    np.testing.assert_allclose(loud, quiet * 2, rtol=1e-9, atol=1e-12)


def test_spectrum_pads_to_power_of_two():
    samples = _sine(3000, 1000)
    padded = samples + [0.0] * 24
    np.testing.assert_allclose(
        samples_to_spectrum(samples, RATE), samples_to_spectrum(padded, RATE)
    )


def test_spectrum_has_a_clear_peak_for_a_tone():
    result = samples_to_spectrum(_sine(6000, 2048), RATE)
    assert np.all(result >= 0.0)
    assert result.max() > 10 * result.mean() / 2


def test_spectrum_rejects_empty_input():
    with pytest.raises(ValueError):
        samples_to_spectrum([], RATE)


def test_spectrum_rejects_low_rate():
    with pytest.raises(ValueError):
        samples_to_spectrum([0.1] * 64, 8000)


def test_stereo_spectrum_matches_channels():
    left = _sine(2000, 512)
    right = _sine(8000, 512, 0.3)
    interleaved = [value for pair in zip(left, right) for value in pair]
    got_left, got_right = stereo_spectrum(interleaved, RATE)
    np.testing.assert_allclose(got_left, samples_to_spectrum(left, RATE))
    np.testing.assert_allclose(got_right, samples_to_spectrum(right, RATE))


def test_bars_start_flat():
    bars = SpectrumBars(1920, 600, 480).step()
    assert len(bars) == 480
    assert all(bar.height == 0 and bar.y == 600 for bar in bars)
    assert [bar.x for bar in bars[:3]] == [0, 4, 8]
    assert all(bar.width == 4 for bar in bars)


def test_bars_reach_full_height_when_saturated():
    bars_model = SpectrumBars(1920, 600, 480)
    bars_model.update([2.0] * 300, [2.0] * 300)
    for _ in range(10):
        bars = bars_model.step()
    assert all(bar.height == 600 and bar.y == 0 for bar in bars)


def test_bars_mirror_left_channel():
    bars_model = SpectrumBars(80, 100, 8)
    ramp = [0.1, 0.2, 0.3, 0.4]
    bars_model.update(ramp, ramp)
    for _ in range(10):
        bars = bars_model.step()
    heights = [bar.height for bar in bars]
    assert heights[:4] == sorted(heights[:4], reverse=True)
    assert heights[4:] == sorted(heights[4:])
    assert heights[0] == heights[7]


def test_bars_reject_zero_lines():
    with pytest.raises(ValueError):
        SpectrumBars(100, 100, 0)