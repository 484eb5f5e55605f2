"""Download time-bounded clips from YouTube videos."""

__version__ = "1.0.0"
