"""Fuzzy track picker for MPD databases."""

__version__ = "0.1.0"
