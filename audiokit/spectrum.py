"""Stereo spectrum analysis and the bar display model built on it."""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

MIN_FREQUENCY = 250.0
MAX_FREQUENCY = 20000.0
AMPLITUDE_GAIN = 39.0
WEIGHT_REFERENCE_HZ = 5000.0
WEIGHT_FLOOR = 0.05
SMOOTHING_DIVISOR = 10.0


def map_range(value, from_range, to_range):
    """Clamp ``value`` into ``from_range`` and map it linearly onto ``to_range``."""
    from_min, from_max = from_range
    to_min, to_max = to_range
    clamped = min(max(value, from_min), from_max)
    return (clamped - from_min) / (from_max - from_min) * (to_max - to_min) + to_min


def split_channels(samples):
    """Split interleaved stereo samples into (left, right) lists."""
    samples = list(samples)
    return samples[0::2], samples[1::2]


def _hann_window(samples: np.ndarray) -> np.ndarray:
    count = len(samples)
    positions = np.arange(count, dtype=np.float64)
    return samples * 0.5 * (1.0 - np.cos(2.0 * math.pi * positions / count))


def _spectrum(samples: np.ndarray, rate: int) -> tuple[np.ndarray, np.ndarray]:
    count = len(samples)
    if count < 2:
        raise ValueError("at least two samples are needed for a spectrum")
    if count & (count - 1):
        raise ValueError("sample count must be a power of two")
    if np.isnan(samples).any():
        raise ValueError("samples must not contain NaN")
    if rate <= 0:
        raise ValueError("rate must be positive")
    nyquist = rate / 2.0
    if MAX_FREQUENCY > nyquist:
        raise ValueError(
            f"frequency limit {MAX_FREQUENCY} Hz exceeds the Nyquist frequency {nyquist} Hz"
        )
    magnitudes = np.abs(np.fft.rfft(samples))
    frequencies = np.arange(len(magnitudes), dtype=np.float64) * rate / count
    keep = (frequencies >= MIN_FREQUENCY) & (frequencies <= MAX_FREQUENCY)
    return frequencies[keep], magnitudes[keep] / math.sqrt(count)


def samples_to_spectrum(samples, rate):
    """Weighted, smoothed magnitudes of 250 Hz - 20 kHz for one channel.

    The samples are zero-padded to the next power of two and Hann windowed.
    Raises ValueError when there are too few samples or the rate is too low.
    """
    values = np.asarray(list(samples), dtype=np.float64)
    if len(values) == 0:
        raise ValueError("at least two samples are needed for a spectrum")
    padded_length = 2 ** math.ceil(math.log2(len(values)))
    padded = np.zeros(padded_length, dtype=np.float64)
    padded[: len(values)] = values
    frequencies, magnitudes = _spectrum(_hann_window(padded), rate)

    weights = np.clip(frequencies / WEIGHT_REFERENCE_HZ, WEIGHT_FLOOR, 1.0)
    amplitudes = magnitudes * AMPLITUDE_GAIN * weights
    if len(amplitudes) <= 2:
        return amplitudes

    # Each point is averaged with its already smoothed predecessor.
    smoothed = [float(amplitudes[0])]
    for current, following in zip(amplitudes[1:-1], amplitudes[2:]):
        smoothed.append((smoothed[-1] + float(current) + float(following)) / 3.0)
    smoothed.append(float(amplitudes[-1]))
    return np.asarray(smoothed, dtype=np.float64)


def stereo_spectrum(samples, rate):
    """Spectra of the left and right channels of interleaved stereo samples."""
    left, right = split_channels(samples)
    return samples_to_spectrum(left, rate), samples_to_spectrum(right, rate)


def resample_linear(values, length):
    """Linearly stretch or shrink ``values`` to ``length`` points.

    Returns the points that can be produced: nothing for empty input or a zero
    length, and only the first point when the input or the output has a single
    point.
    """
    source = np.asarray(list(values), dtype=np.float32)
    if length == 0 or len(source) == 0:
        return []
    if len(source) == 1 or length == 1:
        return [float(source[0])]
    positions = (
        np.arange(length, dtype=np.float32)
        * np.float32(len(source) - 1)
        / np.float32(length - 1)
    )
    left = np.floor(positions).astype(np.int64)
    right = np.minimum(left + 1, len(source) - 1)
    fraction = positions - left.astype(np.float32)
    result = source[left] * (np.float32(1.0) - fraction) + source[right] * fraction
    return [float(value) for value in result]


class Bar(NamedTuple):
    """A filled rectangle: left edge, top edge, width and height in pixels."""

    x: int
    y: int
    width: int
    height: int


class SpectrumBars:
    """Mirrored left/right spectrum bars that move smoothly towards new data."""

    def __init__(self, width, height, line_count):
        if line_count < 1:
            raise ValueError("line_count must be at least 1")
        self.width = width
        self.height = height
        self.line_count = line_count
        self.channel_count = line_count // 2
        self.bar_width = width // line_count
        self.old = np.zeros(line_count, dtype=np.float64)
        self.new = np.zeros(line_count, dtype=np.float64)
        self.current = np.zeros(line_count, dtype=np.float64)

    def update(self, left, right):
        """Take new spectra: left is drawn mirrored, right follows it."""
        half = self.channel_count
        self.old = self.current.copy()
        left_points = resample_linear(left, half)
        self.new[: len(left_points)] = left_points
        self.new[:half] = self.new[:half][::-1].copy()
        right_points = resample_linear(right, half)
        self.new[half : half + len(right_points)] = right_points

    def step(self):
        """Advance one frame and return the bars to draw."""
        self.current += (self.new - self.old) / SMOOTHING_DIVISOR
        bars = []
        for index, level in enumerate(self.current):
            scaled = map_range(float(level), (0.0, 1.0), (0.0, float(self.height)))
            bar_height = max(0, int(scaled))
            bars.append(
                Bar(
                    index * self.bar_width,
                    self.height - bar_height,
                    self.bar_width,
                    bar_height,
                )
            )
        return bars