"""Exception hierarchy shared by the tile fill generator."""
from __future__ import annotations


class TileFillError(Exception):
    """Base class for every error raised by :mod:`tilefill`."""


class ConfigurationError(TileFillError, ValueError):
    """Raised when the alphabet, seed or generation parameters are unusable."""
