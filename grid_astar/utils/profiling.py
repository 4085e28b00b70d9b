"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
import time
import logging
from pathlib import Path
from typing import Callable, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def profile_search(
    callback: Callable[[], T],
    out_path: str | Path = "search.prof",
) -> Tuple[T, pstats.Stats]:
    """Run ``callback`` under cProfile and dump stats to ``out_path``.

    Parameters
    ----------
    callback:
        Zero-argument callable performing the search.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    tuple
        The callback's return value and the profiling statistics.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    start = time.perf_counter()
    profiler.enable()
    try:
        result = callback()
    finally:
        profiler.disable()
    elapsed = time.perf_counter() - start
    profiler.dump_stats(str(path))
    logger.info("Search took %.1f ms, profile written to %s", elapsed * 1000, path)
    return result, pstats.Stats(profiler)


__all__ = ["profile_search"]
