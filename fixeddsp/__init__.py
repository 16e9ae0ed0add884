"""Saturating fixed-point and float32 signal-processing primitives and radix-4 complex FFTs."""

__version__ = "0.1.0"