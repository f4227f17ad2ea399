# audiokit

Small building blocks for working with PCM audio in Python: sample formats,
sample-rate conversion, spectrum analysis for bar displays, and a logging
setup.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `audiokit.sample`

`SampleFormat` is an enumeration of `I16`, `U16` and `F32`. Each member
provides:

- `lerp(first, second, numerator, denominator)`: interpolation from `first`
  towards `second`. Integer formats use truncating integer division and wrap
  to 16 bits.
- `amplify(value, factor)`: multiplication by a gain; integer formats
  saturate at their limits.
- `saturating_add(first, second)`: addition, clamped for integer formats.
- `zero_value()`: the silence value (`0`, `32768` or `0.0`).

`convert_sample(value, source, target)` converts one value between formats,
and `convert_samples(samples, source, target)` is a generator doing the same
for an iterable.

### `audiokit.sample_rate`

`SampleRateConverter(samples, from_rate, to_rate, channels,
sample_format=SampleFormat.F32)` is an iterator that turns interleaved
samples at one rate into interleaved samples at another, interpolating
linearly between frames. Rates and channel count must be at least 1, or
`ValueError` is raised. Equal rates pass samples through unchanged.
`size_hint()` returns an estimated `(lower, upper)` count of remaining
samples (`upper` is `None` when the input length is unknown), and
`into_inner()` returns the underlying input iterator.

### `audiokit.spectrum`

- `map_range(value, from_range, to_range)`: clamp into `from_range` and map
  linearly onto `to_range`.
- `split_channels(samples)`: split interleaved stereo into `(left, right)`.
- `samples_to_spectrum(samples, rate)`: zero-pads to a power of two, applies
  a Hann window and returns weighted, smoothed FFT magnitudes between 250 Hz
  and 20 kHz as a NumPy array. Raises `ValueError` for too few samples or a
  rate whose Nyquist frequency is below 20 kHz.
- `stereo_spectrum(samples, rate)`: the spectra of both channels.
- `resample_linear(values, length)`: stretch or shrink a curve to `length`
  points (an empty list for empty input or zero length; a single point when
  either side has one point).
- `SpectrumBars(width, height, line_count)`: bar display state. `update(left,
  right)` takes new spectra (left drawn mirrored, right after it), and
  `step()` moves the bars one frame towards the new data and returns a list
  of `Bar(x, y, width, height)` rectangles.

### `audiokit.playback`

- `format_duration(duration)`: seconds as `HH:MM:SS`.
- `decode_pcm_i16(data, volume)`: little-endian 16-bit PCM bytes to
  volume-scaled integer samples; an odd byte count raises `ValueError`.
- `convert_chunk(data, from_rate, to_rate, channels, volume)`: decode, scale
  and resample a chunk to the output rate.

### `audiokit.log_conf`

`configure_logging(targets)` installs a stdout handler with local
`[YYYY-mm-dd HH:MM:SS]` timestamps that passes only records from the given
logger names (plus `py.warnings` and `panic`) and their children. The level
is read from the `AUDIOKIT_LOG` environment variable: `error`, `warn`,
`info`, `debug`, `trace` or `1`–`5`; anything else means debug. Calling it a
second time raises `RuntimeError`. `resolve_level(value)` performs the level
lookup, and `LocalTimeFormatter` is the formatter used.

## Example

```python
from audiokit.sample import SampleFormat
from audiokit.sample_rate import SampleRateConverter

stereo = [0, 0, 100, -100, 200, -200, 300, -300]
converter = SampleRateConverter(stereo, 1, 2, 2, SampleFormat.I16)
print(list(converter))
```

```python
from audiokit.playback import convert_chunk, format_duration

print(format_duration(3725))  # 01:02:05
pcm = convert_chunk(b"\x10\x00\x20\x00", 44100, 48000, 2, 0.5)
```

## What it does not do

audiokit has no command-line program. It does not decode audio files, open
sound devices for playback or capture, or draw anything on screen: it
supplies the sample processing and the bar geometry, and leaves input,
output and rendering to the caller.