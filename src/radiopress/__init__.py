"""Static music-streaming site publisher and playback model."""

__version__ = "0.1.0"
