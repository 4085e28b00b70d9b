"""Read-only 4-connected graph over a 2-D field of traversal costs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from ..errors import OutOfBoundsError
from .vertex import GraphVertex, VisitedGraphVertex

AnyVertex = Union[GraphVertex, VisitedGraphVertex]


@dataclass(frozen=True)
class Direction:
    """Unit step on the grid."""

    x: int
    y: int


DIRECTION_UP = Direction(0, -1)
DIRECTION_DOWN = Direction(0, 1)
DIRECTION_LEFT = Direction(-1, 0)
DIRECTION_RIGHT = Direction(1, 0)

ALL_DIRECTIONS: Tuple[Direction, ...] = (
    DIRECTION_UP,
    DIRECTION_DOWN,
    DIRECTION_LEFT,
    DIRECTION_RIGHT,
)


class GridGraph:
    """Grid of per-cell costs in ``0..255`` viewed as a graph.

    ``tiles`` is borrowed, not copied, and indexed as ``tiles[y][x]``.
    ``impassable_cost`` optionally names a cost value that marks a cell as a
    wall the search never steps onto.
    """

    def __init__(
        self,
        width: int,
        height: int,
        tiles: Sequence[Sequence[int]],
        impassable_cost: Optional[int] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        if len(tiles) != height:
            raise ValueError(f"expected {height} rows, got {len(tiles)}")
        for y, row in enumerate(tiles):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
        self.width = width
        self.height = height
        self.tiles = tiles
        self.impassable_cost = impassable_cost

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], impassable_cost: Optional[int] = None
    ) -> "GridGraph":
        """Build a graph whose dimensions are taken from ``rows``."""

        height = len(rows)
        width = len(rows[0]) if rows else 0
        return cls(width, height, rows, impassable_cost=impassable_cost)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, vertex: AnyVertex) -> bool:
        """Return ``True`` if ``vertex`` lies inside the grid."""

        return 0 <= vertex.x < self.width and 0 <= vertex.y < self.height

    def get_neighbouring_vertex(
        self, vertex: AnyVertex, direction: Direction
    ) -> Optional[GraphVertex]:
        """Return the cell one ``direction`` step away, or ``None`` off-grid."""

        neighbour_x = vertex.x + direction.x
        neighbour_y = vertex.y + direction.y
        if (
            neighbour_x < 0
            or neighbour_y < 0
            or neighbour_x >= self.width
            or neighbour_y >= self.height
        ):
            return None
        return GraphVertex(neighbour_x, neighbour_y)

    def get_cost(self, vertex: AnyVertex) -> int:
        """Return the traversal cost stored for ``vertex``."""

        if not self.contains(vertex):
            raise OutOfBoundsError(
                f"({vertex.x}, {vertex.y}) outside {self.width}x{self.height} grid"
            )
        return self.tiles[vertex.y][vertex.x]

    def is_passable(self, vertex: AnyVertex) -> bool:
        """Return ``False`` if ``vertex`` holds the impassable sentinel."""

        if self.impassable_cost is None:
            return True
        return self.get_cost(vertex) != self.impassable_cost


__all__ = [
    "ALL_DIRECTIONS",
    "DIRECTION_DOWN",
    "DIRECTION_LEFT",
    "DIRECTION_RIGHT",
    "DIRECTION_UP",
    "Direction",
    "GridGraph",
]
