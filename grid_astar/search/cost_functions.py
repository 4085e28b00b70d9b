"""Priority score strategies for the A* search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from ..core.vertex import GraphVertex, VisitedGraphVertex
from ..errors import UnknownCostFunctionError


@dataclass(frozen=True)
class PathfindingOptions:
    """Weights applied to the accumulated cost and the heuristic term."""

    cost_weight: float = 1.0
    heuristics_weight: float = 1.0


CostFunc = Callable[
    [GraphVertex, GraphVertex, VisitedGraphVertex, GraphVertex, int, PathfindingOptions],
    float,
]


def zero_cost_function(
    start_vertex: GraphVertex,
    goal_vertex: GraphVertex,
    last_visited_vertex: VisitedGraphVertex,
    current_vertex: GraphVertex,
    current_vertex_cost: int,
    options: PathfindingOptions,
) -> float:
    """Uniform-cost score without any heuristic term."""

    return (last_visited_vertex.cost + current_vertex_cost) * options.cost_weight


def euclidean_distance_cost_function(
    start_vertex: GraphVertex,
    goal_vertex: GraphVertex,
    last_visited_vertex: VisitedGraphVertex,
    current_vertex: GraphVertex,
    current_vertex_cost: int,
    options: PathfindingOptions,
) -> float:
    """Accumulated cost plus straight-line distance to the goal."""

    g = last_visited_vertex.cost + current_vertex_cost
    h = math.sqrt(
        (goal_vertex.x - current_vertex.x) ** 2 + (goal_vertex.y - current_vertex.y) ** 2
    )
    return g * options.cost_weight + h * options.heuristics_weight


def manhattan_distance_cost_function(
    start_vertex: GraphVertex,
    goal_vertex: GraphVertex,
    last_visited_vertex: VisitedGraphVertex,
    current_vertex: GraphVertex,
    current_vertex_cost: int,
    options: PathfindingOptions,
) -> float:
    """Accumulated cost plus 4-neighbour distance to the goal."""

    g = last_visited_vertex.cost + current_vertex_cost
    h = abs(current_vertex.x - goal_vertex.x) + abs(current_vertex.y - goal_vertex.y)
    return g * options.cost_weight + h * options.heuristics_weight


class CostFunction(Enum):
    """Selectable scoring strategies."""

    ZERO_COST = "zero-cost"
    EUCLIDEAN_DISTANCE = "euclidean-distance"
    MANHATTAN_DISTANCE = "manhattan-distance"

    def get_cost_function(self) -> CostFunc:
        """Return the pure function implementing this strategy."""

        return _COST_FUNCTIONS[self]

    @classmethod
    def parse(cls, name: str) -> "CostFunction":
        """Resolve ``name`` (value, member name or short alias) to a member."""

        key = str(name).strip().lower().replace("_", "-")
        for member in cls:
            if key in (member.value, member.name.lower().replace("_", "-")):
                return member
        alias = _ALIASES.get(key)
        if alias is not None:
            return alias
        choices = ", ".join(m.value for m in cls)
        raise UnknownCostFunctionError(
            f"unknown cost function '{name}' (expected one of: {choices})"
        )


_COST_FUNCTIONS: Dict[CostFunction, CostFunc] = {
    CostFunction.ZERO_COST: zero_cost_function,
    CostFunction.EUCLIDEAN_DISTANCE: euclidean_distance_cost_function,
    CostFunction.MANHATTAN_DISTANCE: manhattan_distance_cost_function,
}

_ALIASES: Dict[str, CostFunction] = {
    "zero": CostFunction.ZERO_COST,
    "uniform": CostFunction.ZERO_COST,
    "uniform-cost": CostFunction.ZERO_COST,
    "euclidean": CostFunction.EUCLIDEAN_DISTANCE,
    "manhattan": CostFunction.MANHATTAN_DISTANCE,
}


__all__ = [
    "CostFunc",
    "CostFunction",
    "PathfindingOptions",
    "euclidean_distance_cost_function",
    "manhattan_distance_cost_function",
    "zero_cost_function",
]
