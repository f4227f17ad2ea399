"""PCM sample formats, sample-rate conversion, spectrum bars and logging setup."""

__version__ = "0.1.0"
__all__ = ["log_conf", "playback", "sample", "sample_rate", "spectrum"]