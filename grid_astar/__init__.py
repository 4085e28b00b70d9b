"""A* path finding over image-derived cost grids."""

from .core.grid_graph import GridGraph
from .core.vertex import GraphVertex, VisitedGraphVertex
from .errors import GridAStarError, OutOfBoundsError
from .search.cost_functions import CostFunction, PathfindingOptions
from .search.pathfinding import PathResult, execute_a_star

__version__ = "0.1.0"

__all__ = [
    "CostFunction",
    "GraphVertex",
    "GridAStarError",
    "GridGraph",
    "OutOfBoundsError",
    "PathResult",
    "PathfindingOptions",
    "VisitedGraphVertex",
    "execute_a_star",
]
