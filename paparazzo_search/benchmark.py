# region Header
"""
benchmark.py — time A* searches over a bitmap map.

Usage:
  paparazzo-bench map.png --scenario around:102,90:20,20 --repeat 5 --diagonal

Each scenario is ``name:row,col:row,col``. Endpoints that land on a wall
are snapped to the nearest free cell.
"""
# endregion

# region Imports
from __future__ import annotations
import argparse
import logging
import statistics
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .astar_core import AStar
from .bitmap import load_grid
from .caching import CachingNeighbourLookup
from .config import DEFAULT_REPEAT, configure_logging
from .grid import Grid, GridNeighbours, euclidean, manhattan, nearest_unblocked, octile
from .observers import ExpansionRecorder
from .path import NOT_FOUND
# endregion

logger = logging.getLogger(__name__)

RC = Tuple[int, int]


# region Data Types
@dataclass(frozen=True)
class Scenario:
    name: str
    start: RC
    goal: RC


@dataclass
class BenchmarkResult:
    name: str
    found: bool
    length: int
    cost: float
    expansions: int
    best_s: float
    mean_s: float

    def format(self) -> str:
        status = f"len={self.length:<5d} cost={self.cost:<9.2f}" if self.found else "NOT_FOUND".ljust(25)
        return (
            f"{self.name:<20s} {status} expansions={self.expansions:<7d} "
            f"best={self.best_s * 1000:8.2f} ms  mean={self.mean_s * 1000:8.2f} ms"
        )
# endregion


# region Scenario Parsing
def _parse_rc(text: str) -> RC:
    try:
        r, c = (int(v) for v in text.split(","))
    except ValueError:
        raise ValueError(f"expected 'row,col', got {text!r}") from None
    return r, c


def parse_scenario(text: str) -> Scenario:
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"expected 'name:row,col:row,col', got {text!r}")
    name, s, g = parts
    return Scenario(name, _parse_rc(s), _parse_rc(g))


def snap_endpoints(grid: Grid, sc: Scenario) -> Tuple[RC, RC]:
    """Move wall endpoints onto the nearest floor cell; off-map endpoints are an error."""
    try:
        return nearest_unblocked(grid, sc.start), nearest_unblocked(grid, sc.goal)
    except ValueError as e:
        raise ValueError(f"{sc.name}: {e}") from None
# endregion


# region Engine Factory
def build_engine(grid: Grid, *, diagonal: bool = False, cache: bool = True, observer=None) -> AStar:
    lookup = GridNeighbours(grid, diagonal=diagonal)
    if cache:
        lookup = CachingNeighbourLookup(lookup)
    if diagonal:
        return AStar(octile, lookup, euclidean, observer)
    return AStar(manhattan, lookup, manhattan, observer)
# endregion


# region Benchmark Runner
def run_benchmark(
    grid: Grid,
    scenarios: Sequence[Scenario],
    *,
    repeat: int = DEFAULT_REPEAT,
    diagonal: bool = False,
    cache: bool = True,
) -> List[BenchmarkResult]:
    if repeat < 1:
        raise ValueError("repeat must be >= 1")
    distance = euclidean if diagonal else manhattan
    results = []
    for sc in scenarios:
        start, goal = snap_endpoints(grid, sc)
        if (start, goal) != (sc.start, sc.goal):
            logger.info("%s: snapped endpoints to %s -> %s", sc.name, start, goal)

        recorder = ExpansionRecorder()
        # a fresh engine per scenario so cache warm-up is shared only across repeats
        engine = build_engine(grid, diagonal=diagonal, cache=cache, observer=recorder)
        timings = []
        path = NOT_FOUND
        for _ in range(repeat):
            recorder.reset()
            t0 = time.perf_counter()
            path = engine.search(start, goal)
            timings.append(time.perf_counter() - t0)

        found = path is not NOT_FOUND
        results.append(
            BenchmarkResult(
                name=sc.name,
                found=found,
                length=len(path) if found else 0,
                cost=path.total_cost(distance) if found else float("inf"),
                expansions=recorder.expansions,
                best_s=min(timings),
                mean_s=statistics.fmean(timings),
            )
        )
    return results
# endregion


# region CLI
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="paparazzo-bench", description="Benchmark A* on a bitmap map.")
    p.add_argument("map", help="image file; white pixels are floor, everything else is wall")
    p.add_argument("--scenario", "-s", action="append", type=parse_scenario, required=True,
                   metavar="NAME:R,C:R,C", help="search to time (repeatable)")
    p.add_argument("--repeat", "-n", type=int, default=DEFAULT_REPEAT)
    p.add_argument("--diagonal", action="store_true", help="8-connected moves")
    p.add_argument("--no-cache", dest="cache", action="store_false",
                   help="do not memoize neighbour lookups")
    p.add_argument("--plot", action="store_true", help="show the last scenario's search")
    p.add_argument("--log-level", default=None)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    grid = load_grid(args.map)
    try:
        results = run_benchmark(grid, args.scenario, repeat=args.repeat,
                                diagonal=args.diagonal, cache=args.cache)
    except ValueError as e:
        parser.error(str(e))
    for res in results:
        print(res.format())

    if args.plot:
        from .viz import show_search

        sc = args.scenario[-1]
        recorder = ExpansionRecorder()
        engine = build_engine(grid, diagonal=args.diagonal, cache=args.cache, observer=recorder)
        start, goal = snap_endpoints(grid, sc)
        path = engine.search(start, goal)
        show_search(grid, path, expanded_order=recorder.closed, start=start, goal=goal,
                    title=f"A* — {sc.name}")
    return 0
# endregion


if __name__ == "__main__":
    raise SystemExit(main())
