"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigError, UnknownCostFunctionError
from .search.cost_functions import CostFunction, PathfindingOptions


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

Colour = Tuple[int, int, int, int]


@dataclass
class SearchConfig:
    """Defaults for a search run."""

    cost_weight: float = 1.0
    heuristics_weight: float = 1.0
    cost_function: CostFunction = CostFunction.MANHATTAN_DISTANCE
    impassable_cost: Optional[int] = None

    def options(self) -> PathfindingOptions:
        return PathfindingOptions(
            cost_weight=self.cost_weight, heuristics_weight=self.heuristics_weight
        )


@dataclass
class ImageConfig:
    """Marker colours and output location for image based runs."""

    start_colour: Colour = (0, 255, 0, 255)
    goal_colour: Colour = (255, 0, 0, 255)
    output_path: str = "path_result.png"


@dataclass
class LoggingConfig:
    """Logging levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    image: ImageConfig
    logging: LoggingConfig


def check_weight(value: float, name: str) -> float:
    """Return ``value`` if it is a usable weight, else raise :class:`ConfigError`."""

    # also rejects NaN
    if not value >= 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


def _parse_weight(data: dict[str, Any], key: str) -> float:
    try:
        value = float(data.get(key, 1.0))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"search.{key} must be a number") from exc
    return check_weight(value, f"search.{key}")


def _parse_colour(value: Any, key: str) -> Colour:
    if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
        raise ConfigError(f"image.{key} must be a list of 3 or 4 channel values")
    try:
        channels = [int(c) for c in value]
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"image.{key} channels must be integers") from exc
    if len(channels) == 3:
        channels.append(255)
    if any(c < 0 or c > 255 for c in channels):
        raise ConfigError(f"image.{key} channels must be within 0..255")
    return tuple(channels)  # type: ignore[return-value]


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    try:
        cost_function = CostFunction.parse(
            search_data.get("cost_function", CostFunction.MANHATTAN_DISTANCE.value)
        )
    except UnknownCostFunctionError as exc:
        raise ConfigError(str(exc)) from exc
    impassable = search_data.get("impassable_cost")
    if impassable is not None:
        try:
            impassable = int(impassable)
        except (TypeError, ValueError) as exc:
            raise ConfigError("search.impassable_cost must be an integer") from exc
        if not 0 <= impassable <= 255:
            raise ConfigError("search.impassable_cost must be within 0..255")
    search = SearchConfig(
        cost_weight=_parse_weight(search_data, "cost_weight"),
        heuristics_weight=_parse_weight(search_data, "heuristics_weight"),
        cost_function=cost_function,
        impassable_cost=impassable,
    )

    image_data = data.get("image") or {}
    image = ImageConfig(
        start_colour=_parse_colour(image_data.get("start_colour", [0, 255, 0, 255]), "start_colour"),
        goal_colour=_parse_colour(image_data.get("goal_colour", [255, 0, 0, 255]), "goal_colour"),
        output_path=str(image_data.get("output_path", "path_result.png")),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, image=image, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "ImageConfig",
    "LoggingConfig",
    "check_weight",
    "load_config",
]
