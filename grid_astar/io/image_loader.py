"""Decode a marker image into a cost grid using :mod:`Pillow`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from ..core.grid_graph import GridGraph
from ..core.vertex import GraphVertex
from ..errors import ImageLoadError, MarkerNotFoundError

logger = logging.getLogger(__name__)

START_VERTEX_COLOR = (0, 255, 0, 255)
GOAL_VERTEX_COLOR = (255, 0, 0, 255)

# Cost assigned to the start and goal cells regardless of their colour.
MARKER_COST = 1


@dataclass
class LoadedGrid:
    """Graph decoded from an image plus the marker positions."""

    graph: GridGraph
    start: GraphVertex
    goal: GraphVertex


def grid_from_image(
    image: Image.Image,
    start_colour: Tuple[int, int, int, int] = START_VERTEX_COLOR,
    goal_colour: Tuple[int, int, int, int] = GOAL_VERTEX_COLOR,
    impassable_cost: Optional[int] = None,
) -> LoadedGrid:
    """Build a :class:`LoadedGrid` from an in-memory ``image``.

    The red channel of every pixel becomes its traversal cost.
    """

    rgba = image.convert("RGBA")
    width, height = rgba.size
    pixels = rgba.load()
    tiles: List[List[int]] = [[0] * width for _ in range(height)]
    start: Optional[GraphVertex] = None
    goal: Optional[GraphVertex] = None

    for y in range(height):
        row = tiles[y]
        for x in range(width):
            pixel = tuple(pixels[x, y])
            if pixel == start_colour:
                start = GraphVertex(x, y)
                row[x] = MARKER_COST
                logger.info("Found start at %d, %d", x, y)
            elif pixel == goal_colour:
                goal = GraphVertex(x, y)
                row[x] = MARKER_COST
                logger.info("Found goal at %d, %d", x, y)
            else:
                row[x] = pixel[0]

    if start is None:
        raise MarkerNotFoundError(f"No start vertex with color rgba{start_colour} found")
    if goal is None:
        raise MarkerNotFoundError(f"No goal vertex with color rgba{goal_colour} found")

    graph = GridGraph(width, height, tiles, impassable_cost=impassable_cost)
    return LoadedGrid(graph=graph, start=start, goal=goal)


def load_grid(
    path: str | Path,
    start_colour: Tuple[int, int, int, int] = START_VERTEX_COLOR,
    goal_colour: Tuple[int, int, int, int] = GOAL_VERTEX_COLOR,
    impassable_cost: Optional[int] = None,
) -> LoadedGrid:
    """Open the image at ``path`` and decode it with :func:`grid_from_image`."""

    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            rgba = image.convert("RGBA")
    except FileNotFoundError as exc:
        raise ImageLoadError(f"File not found: {path}") from exc
    except UnidentifiedImageError as exc:
        raise ImageLoadError(f"Cannot decode image: {path}") from exc
    except OSError as exc:
        raise ImageLoadError(f"Cannot read image: {path} ({exc})") from exc
    return grid_from_image(rgba, start_colour, goal_colour, impassable_cost)


__all__ = [
    "GOAL_VERTEX_COLOR",
    "LoadedGrid",
    "MARKER_COST",
    "START_VERTEX_COLOR",
    "grid_from_image",
    "load_grid",
]
