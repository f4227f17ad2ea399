"""Helpers for turning decoded PCM chunks into output-rate samples."""

from __future__ import annotations

import struct

from .sample import SampleFormat
from .sample_rate import SampleRateConverter


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def format_duration(duration):
    """Format a number of seconds as HH:MM:SS."""
    minutes_total, seconds = _trunc_divmod(duration, 60)
    _, minutes = _trunc_divmod(minutes_total, 60)
    hours, _ = _trunc_divmod(duration, 3600)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def decode_pcm_i16(data, volume):
    """Decode little-endian 16-bit PCM bytes, scaling each sample by ``volume``."""
    if len(data) % 2:
        raise ValueError("PCM data must hold a whole number of 16-bit samples")
    return [
        SampleFormat.I16.amplify(value, volume)
        for (value,) in struct.iter_unpack("<h", bytes(data))
    ]


def convert_chunk(data, from_rate, to_rate, channels, volume):
    """Decode a PCM chunk, apply the volume and convert it to ``to_rate``."""
    samples = decode_pcm_i16(data, volume)
    return list(
        SampleRateConverter(samples, from_rate, to_rate, channels, SampleFormat.I16)
    )