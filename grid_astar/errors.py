"""Exception hierarchy shared by the search core and its I/O helpers."""

from __future__ import annotations


class GridAStarError(Exception):
    """Base error for grid path finding."""


class OutOfBoundsError(GridAStarError, IndexError):
    """Raised when a coordinate lies outside the grid."""


class UnknownCostFunctionError(GridAStarError, ValueError):
    """Raised when a cost function selector cannot be resolved."""


class ConfigError(GridAStarError, ValueError):
    """Raised when configuration values are malformed."""


class ImageLoadError(GridAStarError, OSError):
    """Raised when an input image cannot be decoded."""


class MarkerNotFoundError(GridAStarError, LookupError):
    """Raised when the start or goal marker colour is missing from an image."""


__all__ = [
    "GridAStarError",
    "OutOfBoundsError",
    "UnknownCostFunctionError",
    "ConfigError",
    "ImageLoadError",
    "MarkerNotFoundError",
]
