"""Linear-interpolating sample rate conversion over interleaved samples."""

from __future__ import annotations

import math
import operator
from collections import deque
from collections.abc import Iterable, Iterator
from itertools import islice

from .sample import SampleFormat


class SampleRateConverter:
    """Iterator yielding interleaved samples converted from one rate to another."""

    def __init__(self, samples, from_rate, to_rate, channels, sample_format=SampleFormat.F32):
        if from_rate < 1:
            raise ValueError("from_rate must be at least 1")
        if to_rate < 1:
            raise ValueError("to_rate must be at least 1")
        if channels < 1:
            raise ValueError("channels must be at least 1")

        self._input: Iterator = iter(samples)
        self._format = sample_format
        self._channels = channels
        divisor = math.gcd(from_rate, to_rate)
        if from_rate == to_rate:
            self._current_frame: list = []
            self._next_frame: list = []
        else:
            self._current_frame = self._read_frame()
            self._next_frame = self._read_frame()
        self._from = from_rate // divisor
        self._to = to_rate // divisor
        self._current_frame_pos = 0
        self._next_output_pos = 0
        self._output_buffer: deque = deque()

    def _read_frame(self) -> list:
        return list(islice(self._input, self._channels))

    def _advance_frame(self) -> None:
        self._current_frame_pos += 1
        self._current_frame = self._next_frame
        self._next_frame = self._read_frame()

    def into_inner(self) -> Iterator:
        """Return the underlying iterator of input samples."""
        return self._input

    def __iter__(self):
        return self

    def __next__(self):
        if self._from == self._to:
            return next(self._input)

        if self._output_buffer:
            return self._output_buffer.popleft()

        if self._next_output_pos == self._to:
            self._next_output_pos = 0
            self._advance_frame()
            while self._current_frame_pos != self._from:
                self._advance_frame()
            self._current_frame_pos = 0
        else:
            required = (self._from * self._next_output_pos // self._to) % self._from
            while self._current_frame_pos != required:
                self._advance_frame()

        numerator = (self._from * self._next_output_pos) % self._to
        interpolated = [
            self._format.lerp(cur, nxt, numerator, self._to)
            for cur, nxt in zip(self._current_frame, self._next_frame)
        ]
        self._next_output_pos += 1

        if interpolated:
            self._output_buffer.extend(interpolated[1:])
            return interpolated[0]

        # Input ran out: flush what is left of the current frame.
        if self._current_frame:
            first, *rest = self._current_frame
            self._output_buffer = deque(rest)
            self._current_frame = []
            return first
        raise StopIteration

    def _estimate(self, samples: int) -> int:
        remaining = samples
        if self._current_frame_pos == self._from - 1:
            remaining += len(self._next_frame)
        unread = max(0, self._from - (self._current_frame_pos + 2)) * self._channels
        remaining = max(0, remaining - unread)
        remaining = remaining * self._to // self._from
        current_chunk = (self._to - self._next_output_pos) * self._channels
        return current_chunk + remaining + len(self._output_buffer)

    def size_hint(self) -> tuple[int, int | None]:
        """Estimated (lower, upper) count of samples still to come; upper may be None."""
        hint = operator.length_hint(self._input, -1)
        if self._from == self._to:
            return (hint, hint) if hint >= 0 else (0, None)
        if hint < 0:
            return (self._estimate(0), None)
        estimate = self._estimate(hint)
        return (estimate, estimate)