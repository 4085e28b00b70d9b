from pathlib import Path

import pytest
from PIL import Image

from grid_astar.core.vertex import GraphVertex, VisitedGraphVertex
from grid_astar.errors import ImageLoadError, MarkerNotFoundError
from grid_astar.io.image_loader import MARKER_COST, grid_from_image, load_grid
from grid_astar.io.renderer import EMPTY_VERTEX_COLOR, render_result, save_result
from grid_astar.search.cost_functions import CostFunction
from grid_astar.search.pathfinding import PathResult, execute_a_star


def test_load_grid_reads_red_channel_and_markers(marker_image):
    costs = [
        [10, 20, 30],
        [40, 50, 60],
    ]
    path = marker_image(costs, start=(0, 0), goal=(2, 1))
    loaded = load_grid(path)
    assert (loaded.graph.width, loaded.graph.height) == (3, 2)
    assert loaded.start == GraphVertex(0, 0)
    assert loaded.goal == GraphVertex(2, 1)
    assert loaded.graph.get_cost(GraphVertex(1, 0)) == 20
    assert loaded.graph.get_cost(GraphVertex(0, 1)) == 40
    assert loaded.graph.get_cost(loaded.start) == MARKER_COST
    assert loaded.graph.get_cost(loaded.goal) == MARKER_COST


def test_custom_marker_colours():
    img = Image.new("RGBA", (2, 1), (5, 5, 5, 255))
    img.putpixel((0, 0), (0, 0, 255, 255))
    img.putpixel((1, 0), (255, 255, 0, 255))
    loaded = grid_from_image(img, start_colour=(0, 0, 255, 255), goal_colour=(255, 255, 0, 255))
    assert loaded.start == GraphVertex(0, 0)
    assert loaded.goal == GraphVertex(1, 0)


def test_rgb_images_are_accepted(tmp_path: Path):
    img = Image.new("RGB", (3, 1), (1, 1, 1))
    img.putpixel((0, 0), (0, 255, 0))
    img.putpixel((2, 0), (255, 0, 0))
    path = tmp_path / "rgb.png"
    img.save(path)
    loaded = load_grid(path)
    assert loaded.start == GraphVertex(0, 0)
    assert loaded.goal == GraphVertex(2, 0)


def test_missing_start_marker(marker_image):
    path = marker_image([[1, 1]], start=None, goal=(1, 0))
    with pytest.raises(MarkerNotFoundError, match="start"):
        load_grid(path)


def test_missing_goal_marker(marker_image):
    path = marker_image([[1, 1]], start=(0, 0), goal=None)
    with pytest.raises(MarkerNotFoundError, match="goal"):
        load_grid(path)


def test_missing_file(tmp_path: Path):
    with pytest.raises(ImageLoadError):
        load_grid(tmp_path / "nope.png")


def test_undecodable_file(tmp_path: Path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"not an image")
    with pytest.raises(ImageLoadError):
        load_grid(path)


def test_impassable_cost_is_forwarded(marker_image):
    path = marker_image([[1, 255, 1]], start=(0, 0), goal=(2, 0))
    loaded = load_grid(path, impassable_cost=255)
    assert not loaded.graph.is_passable(GraphVertex(1, 0))
    assert execute_a_star(loaded.graph, loaded.start, loaded.goal, CostFunction.ZERO_COST) is None


def test_render_paints_visited_path_and_markers():
    result = PathResult(
        path=[
            VisitedGraphVertex(0, 0, 0.0),
            VisitedGraphVertex(1, 0, 1.0),
            VisitedGraphVertex(2, 0, 2.0),
        ],
        visited_vertices=[
            VisitedGraphVertex(0, 0, 0.0),
            VisitedGraphVertex(0, 1, 1.0),
            VisitedGraphVertex(1, 0, 1.0),
            VisitedGraphVertex(2, 0, 2.0),
        ],
    )
    img = render_result(3, 2, result, GraphVertex(0, 0), GraphVertex(2, 0))
    assert img.size == (3, 2)
    assert img.getpixel((2, 1)) == EMPTY_VERTEX_COLOR
    # visited only: 1.0 / 2.0 * 200
    assert img.getpixel((0, 1)) == (100, 100, 100, 255)
    # path: round(1.0 / 2.0 * 255)
    assert img.getpixel((1, 0)) == (128, 128, 0, 255)
    assert img.getpixel((0, 0)) == (0, 255, 0, 255)
    assert img.getpixel((2, 0)) == (255, 0, 0, 255)


def test_render_single_cell_result():
    only = VisitedGraphVertex(0, 0, 0.0)
    img = render_result(1, 1, PathResult([only], [only]), GraphVertex(0, 0), GraphVertex(0, 0))
    assert img.getpixel((0, 0)) == (255, 0, 0, 255)


def test_save_result_creates_parent_dirs(tmp_path: Path):
    img = Image.new("RGBA", (1, 1))
    out = save_result(img, tmp_path / "nested" / "out.png")
    assert out.exists()


def _truncated_png(marker_image) -> Path:
    costs = [[(x * 7 + y * 13) % 256 for x in range(32)] for y in range(32)]
    path = marker_image(costs, start=(0, 0), goal=(31, 31))
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])
    return path


def test_directory_input(tmp_path: Path):
    with pytest.raises(ImageLoadError):
        load_grid(tmp_path)


def test_truncated_image(marker_image):
    with pytest.raises(ImageLoadError):
        load_grid(_truncated_png(marker_image))


def test_render_rounds_halves_up():
    result = PathResult(
        path=[],
        visited_vertices=[
            VisitedGraphVertex(0, 1, 400.0),
            VisitedGraphVertex(1, 0, 1.0),
            VisitedGraphVertex(1, 1, 5.0),
        ],
    )
    img = render_result(3, 2, result, GraphVertex(0, 0), GraphVertex(2, 0))
    # 1 / 400 * 200 == 0.5 and 5 / 400 * 200 == 2.5
    assert img.getpixel((1, 0)) == (1, 1, 1, 255)
    assert img.getpixel((1, 1)) == (3, 3, 3, 255)
