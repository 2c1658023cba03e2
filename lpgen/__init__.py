"""Segment-based level pattern generator with a terminal waveform simulator."""

__version__ = "0.1.0"
__all__ = ["core", "sim"]