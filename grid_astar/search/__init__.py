"""search package."""

from .cost_functions import CostFunction, PathfindingOptions
from .pathfinding import Frontier, PathResult, execute_a_star

__all__ = [
    "CostFunction",
    "Frontier",
    "PathResult",
    "PathfindingOptions",
    "execute_a_star",
]
