# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import pytest
from PIL import Image

from grid_astar.core.grid_graph import GridGraph

START = (0, 255, 0, 255)
GOAL = (255, 0, 0, 255)


def uniform_rows(width: int, height: int, cost: int = 1) -> List[List[int]]:
    return [[cost] * width for _ in range(height)]


@pytest.fixture
def uniform_grid() -> Callable[..., GridGraph]:
    """Factory for a ``width`` x ``height`` grid where every cell costs ``cost``."""

    def _make(width: int, height: int, cost: int = 1, impassable_cost=None) -> GridGraph:
        return GridGraph(width, height, uniform_rows(width, height, cost), impassable_cost)

    return _make


@pytest.fixture
def wall_grid() -> GridGraph:
    # 3x3, column 1 is expensive except the top row
    rows = [
        [1, 1, 1],
        [1, 200, 1],
        [1, 200, 1],
    ]
    return GridGraph.from_rows(rows)


@pytest.fixture
def marker_image(tmp_path: Path) -> Callable[..., Path]:
    """Write a PNG whose red channel holds ``costs`` plus start/goal pixels."""

    def _make(
        costs: Sequence[Sequence[int]],
        start: Optional[Tuple[int, int]],
        goal: Optional[Tuple[int, int]],
        name: str = "grid.png",
    ) -> Path:
        height = len(costs)
        width = len(costs[0])
        img = Image.new("RGBA", (width, height))
        for y, row in enumerate(costs):
            for x, cost in enumerate(row):
                img.putpixel((x, y), (cost, cost, cost, 255))
        if start is not None:
            img.putpixel(start, START)
        if goal is not None:
            img.putpixel(goal, GOAL)
        path = tmp_path / name
        img.save(path)
        return path

    return _make
