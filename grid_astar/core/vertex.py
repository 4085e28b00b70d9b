"""Vertex value types used as frontier entries and map keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class GraphVertex:
    """Integer grid coordinate."""

    x: int
    y: int

    def into_visited(self, cost: float) -> "VisitedGraphVertex":
        """Return this coordinate tagged with an accumulated ``cost``."""

        return VisitedGraphVertex(self.x, self.y, float(cost))

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (GraphVertex, VisitedGraphVertex)):
            return (self.x, self.y) == (other.x, other.y)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))


@dataclass(frozen=True, eq=False)
class VisitedGraphVertex:
    """Coordinate carrying the priority score it was discovered with.

    Hashing only looks at ``(x, y)`` so a visited vertex can be looked up in
    maps keyed by :class:`GraphVertex`. Comparing two visited vertices also
    takes ``cost`` into account.
    """

    x: int
    y: int
    cost: float

    @property
    def vertex(self) -> GraphVertex:
        """The plain coordinate without cost."""

        return GraphVertex(self.x, self.y)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, VisitedGraphVertex):
            return (self.x, self.y, self.cost) == (other.x, other.y, other.cost)
        if isinstance(other, GraphVertex):
            return (self.x, self.y) == (other.x, other.y)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __lt__(self, other: "VisitedGraphVertex") -> bool:
        # "less than" means "pops first" for heapq.
        if not isinstance(other, VisitedGraphVertex):
            return NotImplemented
        return compare_priority(self, other) < 0


def compare_priority(a: VisitedGraphVertex, b: VisitedGraphVertex) -> int:
    """Return ``-1`` if ``a`` should pop before ``b``, ``1`` if after, else ``0``.

    Lower cost means higher priority. ``NaN`` costs never compare smaller or
    larger than anything, so they fall through to ``0`` (equal priority) and
    the ordering stays total.
    """

    if a.cost < b.cost:
        return -1
    if a.cost > b.cost:
        return 1
    return 0


__all__ = ["GraphVertex", "VisitedGraphVertex", "compare_priority"]
