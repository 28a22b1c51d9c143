"""Helpers for characters, number conversion, string search, printf-style formatting, containers and line reading."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "containers",
    "convert",
    "lines",
    "printf",
    "search",
]