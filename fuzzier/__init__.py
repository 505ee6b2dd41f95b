"""Fuzzier: preferred-match selection for capped incremental search."""

__version__ = "0.1.0"
