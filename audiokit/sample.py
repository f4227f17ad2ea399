"""Sample formats: interpolation, gain, saturation and format conversion."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from enum import Enum


def _saturate(value: float, low: int, high: int) -> int:
    """Convert to an integer the way a saturating float-to-int cast does."""
    if math.isnan(value):
        return 0
    if value <= low:
        return low
    if value >= high:
        return high
    return int(value)


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _wrap_i16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


class SampleFormat(Enum):
    """A sample's data type: signed 16-bit, unsigned 16-bit or 32-bit float."""

    I16 = "i16"
    U16 = "u16"
    F32 = "f32"

    @property
    def bounds(self) -> tuple[float, float]:
        if self is SampleFormat.I16:
            return (-32768, 32767)
        if self is SampleFormat.U16:
            return (0, 65535)
        return (-1.0, 1.0)

    def lerp(self, first, second, numerator, denominator):
        """Interpolate from ``first`` towards ``second`` by numerator/denominator."""
        if self is SampleFormat.F32:
            return first + (second - first) * numerator / denominator
        value = first + _div_trunc((second - first) * numerator, denominator)
        if self is SampleFormat.U16:
            return value & 0xFFFF
        return _wrap_i16(value)

    def amplify(self, value, factor):
        """Multiply a sample by ``factor``."""
        if self is SampleFormat.F32:
            return value * factor
        low, high = self.bounds
        return _saturate(value * factor, low, high)

    def saturating_add(self, first, second):
        """Add two samples, clamping integer formats at their limits."""
        if self is SampleFormat.F32:
            return first + second
        low, high = self.bounds
        return max(low, min(high, first + second))

    def zero_value(self):
        """The value that stands for silence."""
        if self is SampleFormat.U16:
            return 32768
        if self is SampleFormat.I16:
            return 0
        return 0.0


def _to_i16(value, source: SampleFormat) -> int:
    if source is SampleFormat.I16:
        return value
    if source is SampleFormat.U16:
        return value - 32768
    return _saturate(value * 32768.0, -32768, 32767)


def _from_i16(value: int, target: SampleFormat):
    if target is SampleFormat.I16:
        return value
    if target is SampleFormat.U16:
        return value + 32768
    return value / 32768.0


def convert_sample(value, source, target):
    """Convert one sample from the ``source`` format to the ``target`` format."""
    if source is target:
        return value
    return _from_i16(_to_i16(value, source), target)


def convert_samples(
    samples: Iterable, source: SampleFormat, target: SampleFormat
) -> Iterator:
    """Lazily convert every sample of ``samples`` to the ``target`` format."""
    for value in samples:
        yield convert_sample(value, source, target)