"""Promotion creation wizard core."""

__version__ = "0.1.0"
