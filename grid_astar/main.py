# grid_astar/main.py
"""Command line entry point: image in, path image out."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import CONFIG, Config, check_weight, load_config
from .errors import ConfigError, GridAStarError, UnknownCostFunctionError
from .io.image_loader import load_grid
from .io.renderer import render_result, save_result
from .search.cost_functions import CostFunction, PathfindingOptions
from .search.pathfinding import execute_a_star
from .utils.profiling import profile_search

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_INPUT_ERROR = 3


def configure_logging(cfg: Config) -> None:
    """Apply the configured global and per-module log levels."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-astar",
        description="A* path finding on a grid graph decoded from an image",
    )
    parser.add_argument(
        "input_path",
        type=Path,
        help="image containing traversal costs and start/goal marker pixels",
    )
    parser.add_argument(
        "-c", "--cost-weight", type=float, default=None,
        help="weight of the accumulated path cost",
    )
    parser.add_argument(
        "-H", "--heuristics-weight", type=float, default=None,
        help="weight of the heuristics function",
    )
    parser.add_argument(
        "-f", "--cost-function", default=None,
        help="one of: " + ", ".join(m.value for m in CostFunction),
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="result image path")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML configuration file (defaults to the bundled config.yaml)",
    )
    parser.add_argument("--profile", type=Path, default=None, help="write cProfile stats here")
    return parser


def run(args: argparse.Namespace, cfg: Config) -> int:
    """Execute one search described by ``args`` on top of ``cfg`` defaults."""

    cost_function = (
        CostFunction.parse(args.cost_function)
        if args.cost_function is not None
        else cfg.search.cost_function
    )
    options = PathfindingOptions(
        cost_weight=args.cost_weight if args.cost_weight is not None else cfg.search.cost_weight,
        heuristics_weight=(
            args.heuristics_weight
            if args.heuristics_weight is not None
            else cfg.search.heuristics_weight
        ),
    )
    output = args.output if args.output is not None else Path(cfg.image.output_path)

    loaded = load_grid(
        args.input_path,
        start_colour=cfg.image.start_colour,
        goal_colour=cfg.image.goal_colour,
        impassable_cost=cfg.search.impassable_cost,
    )
    logger.info(
        "Searching %dx%d grid with %s (cost_weight=%s, heuristics_weight=%s)",
        loaded.graph.width,
        loaded.graph.height,
        cost_function.value,
        options.cost_weight,
        options.heuristics_weight,
    )

    def search():
        return execute_a_star(loaded.graph, loaded.start, loaded.goal, cost_function, options)

    if args.profile is not None:
        result, _ = profile_search(search, args.profile)
    else:
        result = search()

    if result is None:
        logger.error("Couldn't find valid path")
        return EXIT_NO_PATH

    logger.info(
        "Found path of %d vertices (cost %.2f), visited %d vertices",
        len(result.path),
        result.total_cost,
        len(result.visited_vertices),
    )
    image = render_result(
        loaded.graph.width,
        loaded.graph.height,
        result,
        loaded.start,
        loaded.goal,
        start_colour=cfg.image.start_colour,
        goal_colour=cfg.image.goal_colour,
    )
    saved = save_result(image, output)
    logger.info("Saved result to %s", saved)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.config is None:
            cfg = CONFIG
        elif not args.config.is_file():
            parser.error(f"config file not found: {args.config}")
        else:
            cfg = load_config(args.config)
        for flag, value in (
            ("--cost-weight", args.cost_weight),
            ("--heuristics-weight", args.heuristics_weight),
        ):
            if value is not None:
                check_weight(value, flag)
    except ConfigError as exc:
        parser.error(str(exc))
    configure_logging(cfg)

    try:
        return run(args, cfg)
    except UnknownCostFunctionError as exc:
        parser.error(str(exc))
    except GridAStarError as exc:
        logger.error("%s", exc)
        return EXIT_INPUT_ERROR


__all__ = ["build_parser", "configure_logging", "main", "run"]
