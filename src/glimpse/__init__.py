"""Glimpse: heuristic text and image content analysis."""

__version__ = "0.1.0"
