"""Screens for Fuzzier."""

from .search_palette import SearchPalette

__all__ = ["SearchPalette"]
