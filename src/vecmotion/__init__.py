"""Timeline-driven vector animation rendered with Pillow."""

__version__ = "0.1.0"
