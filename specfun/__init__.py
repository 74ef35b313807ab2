"""Logarithms, modified Bessel functions, normal and Kolmogorov-Smirnov distributions, and small numerical tools."""

__version__ = "0.1.0"