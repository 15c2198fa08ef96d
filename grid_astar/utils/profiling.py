"""Timing and cProfile helpers for repeated searches on one grid."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from ..core.grid import Grid
from ..search.astar import EndpointLike, search

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Outcome of :func:`benchmark_search`."""

    iterations: int
    path_length: int
    total_seconds: float
    per_search: List[float] = field(default_factory=list)

    @property
    def average_ms(self) -> float:
        if not self.iterations:
            return 0.0
        return self.total_seconds / self.iterations * 1000


def benchmark_search(
    grid: Grid,
    start: EndpointLike,
    end: EndpointLike,
    iterations: int = 1000,
    **kwargs: Any,
) -> BenchmarkResult:
    """Run the same search ``iterations`` times and record each duration.

    Extra keyword arguments are forwarded to :func:`search`.
    """

    if iterations <= 0:
        raise ValueError("iterations must be positive")

    durations: List[float] = []
    path_length = 0
    begin = time.perf_counter()
    last = begin
    for _ in range(iterations):
        path = search(grid, start, end, **kwargs)
        now = time.perf_counter()
        durations.append(now - last)
        last = now
        path_length = len(path)
    total = time.perf_counter() - begin

    result = BenchmarkResult(
        iterations=iterations,
        path_length=path_length,
        total_seconds=total,
        per_search=durations,
    )
    logger.info(
        "Found path with %s steps; average time %.2f ms over %s searches",
        path_length,
        result.average_ms,
        iterations,
    )
    return result


def profile_searches(
    n: int,
    grid: Grid,
    start: EndpointLike,
    end: EndpointLike,
    out_path: str | Path = "search.prof",
    **kwargs: Any,
) -> pstats.Stats:
    """Profile ``n`` searches and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to profile.
    grid, start, end:
        Passed to :func:`search` unchanged on every iteration.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        search(grid, start, end, **kwargs)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["BenchmarkResult", "benchmark_search", "profile_searches"]
