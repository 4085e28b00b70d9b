"""core package."""

from .grid_graph import (
    ALL_DIRECTIONS,
    DIRECTION_DOWN,
    DIRECTION_LEFT,
    DIRECTION_RIGHT,
    DIRECTION_UP,
    Direction,
    GridGraph,
)
from .vertex import GraphVertex, VisitedGraphVertex, compare_priority

__all__ = [
    "ALL_DIRECTIONS",
    "DIRECTION_DOWN",
    "DIRECTION_LEFT",
    "DIRECTION_RIGHT",
    "DIRECTION_UP",
    "Direction",
    "GridGraph",
    "GraphVertex",
    "VisitedGraphVertex",
    "compare_priority",
]
