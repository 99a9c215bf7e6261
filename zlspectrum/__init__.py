"""Spectrum analyzers, gain smoothing, mid/side splitting, interpolation and interface settings."""

__version__ = "0.1.0"