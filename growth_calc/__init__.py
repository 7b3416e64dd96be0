"""Compound interest projection calculator."""

__version__ = "0.1.0"
