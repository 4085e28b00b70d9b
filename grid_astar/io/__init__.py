"""io package."""

from .image_loader import LoadedGrid, load_grid
from .renderer import render_result, save_result

__all__ = ["LoadedGrid", "load_grid", "render_result", "save_result"]
