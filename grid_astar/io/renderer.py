"""Paint a search result into an image."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Tuple

from PIL import Image

from ..core.vertex import GraphVertex, VisitedGraphVertex
from ..search.pathfinding import PathResult
from .image_loader import GOAL_VERTEX_COLOR, START_VERTEX_COLOR

EMPTY_VERTEX_COLOR = (255, 255, 255, 255)


def _max_cost(vertices: Iterable[VisitedGraphVertex]) -> float:
    max_cost = 0.0
    for vertex in vertices:
        if vertex.cost > max_cost:
            max_cost = vertex.cost
    return max_cost


def _scale(cost: float, max_cost: float, top: float) -> int:
    if max_cost <= 0 or math.isnan(cost):
        return 0
    # halves round away from zero
    return int(math.floor(cost / max_cost * top + 0.5))


def render_result(
    width: int,
    height: int,
    result: PathResult,
    start: GraphVertex,
    goal: GraphVertex,
    start_colour: Tuple[int, int, int, int] = START_VERTEX_COLOR,
    goal_colour: Tuple[int, int, int, int] = GOAL_VERTEX_COLOR,
) -> Image.Image:
    """Return an RGBA image showing visited cells and the path.

    Visited cells are grey, darker for cheaper scores. Path cells shade from
    dark to bright orange-red as the score grows.
    """

    img = Image.new("RGBA", (width, height), EMPTY_VERTEX_COLOR)
    pixels = img.load()

    max_visited_cost = _max_cost(result.visited_vertices)
    for vertex in result.visited_vertices:
        shade = _scale(vertex.cost, max_visited_cost, 200.0)
        pixels[vertex.x, vertex.y] = (shade, shade, shade, 255)

    max_path_cost = _max_cost(result.path)
    for vertex in result.path:
        pixels[vertex.x, vertex.y] = (_scale(vertex.cost, max_path_cost, 255.0), 128, 0, 255)

    pixels[start.x, start.y] = start_colour
    pixels[goal.x, goal.y] = goal_colour
    return img


def save_result(image: Image.Image, path: str | Path) -> Path:
    """Write ``image`` to ``path`` and return the resolved path."""

    out = Path(path)
    if out.parent and not out.parent.exists():
        out.parent.mkdir(parents=True, exist_ok=True)
    image.save(out)
    return out


__all__ = ["EMPTY_VERTEX_COLOR", "render_result", "save_result"]
