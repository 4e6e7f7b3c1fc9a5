from __future__ import annotations


class SearchError(Exception):
    """Base class for everything the solver raises."""


class ConfigurationError(SearchError, ValueError):
    """Unknown heuristic / evaluation / move-rule selector or bad option."""


class DimensionMismatch(SearchError, ValueError):
    """Initial and goal grids are not square boards of the same size."""


class PuzzleFormatError(SearchError, ValueError):
    """A puzzle file could not be parsed."""
