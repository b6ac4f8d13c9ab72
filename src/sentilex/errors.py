"""Exception types raised by sentilex."""

from __future__ import annotations


class SentimentError(Exception):
    """Base class for sentilex errors."""


class InitializationError(SentimentError):
    """The lexicon source could not be read or contained a malformed entry."""


class DivisionUndefinedError(SentimentError, ZeroDivisionError):
    """An average was requested over zero tokens or zero matched words."""
