"""Lyricbook — collect UtaTen lyrics into an e-book."""

__version__ = "0.1.0"
