"""A* search over a :class:`~grid_astar.core.grid_graph.GridGraph`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, List, Optional, Union

from ..core.grid_graph import ALL_DIRECTIONS, GridGraph
from ..core.vertex import GraphVertex, VisitedGraphVertex
from ..errors import OutOfBoundsError
from .cost_functions import CostFunc, CostFunction, PathfindingOptions

logger = logging.getLogger(__name__)


class Frontier:
    """Open set popping the lowest-cost entry first.

    Duplicate coordinates are not merged; callers guard re-discovery with
    their own closed set.
    """

    def __init__(self) -> None:
        self._heap: List[VisitedGraphVertex] = []

    def push(self, vertex: VisitedGraphVertex) -> None:
        heappush(self._heap, vertex)

    def pop(self) -> Optional[VisitedGraphVertex]:
        """Return the next entry, or ``None`` once exhausted."""

        if not self._heap:
            return None
        return heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


@dataclass
class PathResult:
    """Path from start to goal plus every vertex popped along the way."""

    path: List[VisitedGraphVertex] = field(default_factory=list)
    visited_vertices: List[VisitedGraphVertex] = field(default_factory=list)

    @property
    def total_cost(self) -> float:
        """Score the goal was discovered with."""

        return self.path[-1].cost if self.path else 0.0

    def __len__(self) -> int:
        return len(self.path)


def _reconstruct(
    parent_map: Dict[GraphVertex, VisitedGraphVertex], goal: VisitedGraphVertex
) -> List[VisitedGraphVertex]:
    path = [goal]
    vertex = parent_map[goal.vertex]
    path.append(vertex)
    while vertex.vertex in parent_map:
        vertex = parent_map[vertex.vertex]
        path.append(vertex)
    path.reverse()
    return path


def execute_a_star(
    graph: GridGraph,
    start_vertex: GraphVertex,
    goal_vertex: GraphVertex,
    cost_function: Union[CostFunction, CostFunc],
    options: Optional[PathfindingOptions] = None,
) -> Optional[PathResult]:
    """Search a path from ``start_vertex`` to ``goal_vertex``.

    A cell is marked closed the moment it is discovered, so it is pushed at
    most once. Its parent entry is only replaced by a predecessor whose own
    cost is lower. With a non-admissible ``cost_function`` the path is valid
    but not necessarily the cheapest.

    Returns ``None`` when the goal cannot be reached.
    """

    for name, vertex in (("start", start_vertex), ("goal", goal_vertex)):
        if not graph.contains(vertex):
            raise OutOfBoundsError(
                f"{name} ({vertex.x}, {vertex.y}) outside "
                f"{graph.width}x{graph.height} grid"
            )

    if options is None:
        options = PathfindingOptions()
    if isinstance(cost_function, CostFunction):
        cost_func = cost_function.get_cost_function()
    else:
        cost_func = cost_function

    start_visited = start_vertex.into_visited(0.0)
    if start_vertex == goal_vertex:
        logger.info("Start %s is the goal", start_vertex)
        return PathResult(path=[start_visited], visited_vertices=[start_visited])

    open_list = Frontier()
    closed_list: Dict[GraphVertex, float] = {}
    parent_map: Dict[GraphVertex, VisitedGraphVertex] = {}
    visited_vertices: List[VisitedGraphVertex] = []
    goal_entry: Optional[VisitedGraphVertex] = None

    open_list.push(start_visited)
    closed_list[start_vertex] = 0.0

    visit_amount = 0
    visit_neighbour_amount = 0

    while open_list:
        current_vertex = open_list.pop()
        visit_amount += 1
        visited_vertices.append(current_vertex)

        if current_vertex == goal_vertex:
            logger.info("Found goal %s", current_vertex)
            goal_entry = current_vertex
            break

        curr_visited_neighbours = 0
        for direction in ALL_DIRECTIONS:
            neighbour_vertex = graph.get_neighbouring_vertex(current_vertex, direction)
            if neighbour_vertex is None or neighbour_vertex in closed_list:
                continue
            if not graph.is_passable(neighbour_vertex):
                continue

            visit_neighbour_amount += 1
            curr_visited_neighbours += 1
            vertex_cost = graph.get_cost(neighbour_vertex)
            calculated_cost = cost_func(
                start_vertex,
                goal_vertex,
                current_vertex,
                neighbour_vertex,
                vertex_cost,
                options,
            )

            parent = parent_map.get(neighbour_vertex)
            if parent is None or parent.cost > current_vertex.cost:
                parent_map[neighbour_vertex] = current_vertex
            open_list.push(neighbour_vertex.into_visited(calculated_cost))
            closed_list[neighbour_vertex] = current_vertex.cost

            logger.debug(
                "%d, %d visited %d, %d",
                current_vertex.x,
                current_vertex.y,
                neighbour_vertex.x,
                neighbour_vertex.y,
            )

        logger.debug(
            "%d, %d visited %d neighbours",
            current_vertex.x,
            current_vertex.y,
            curr_visited_neighbours,
        )

    logger.info(
        "Visited %d vertices and %d neighbours", visit_amount, visit_neighbour_amount
    )

    if goal_entry is None or goal_vertex not in parent_map:
        logger.warning("No path from %s to %s", start_vertex, goal_vertex)
        return None

    return PathResult(
        path=_reconstruct(parent_map, goal_entry),
        visited_vertices=visited_vertices,
    )


__all__ = ["Frontier", "PathResult", "execute_a_star"]
