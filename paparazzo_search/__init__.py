from .astar_core import AStar, NodeRecord, astar
from .interfaces import (
    DistanceCalculator,
    HeuristicEstimator,
    NeighbourLookup,
    NullObserver,
    SearchObserver,
)
from .path import NOT_FOUND, Path

__all__ = [
    "AStar",
    "NodeRecord",
    "astar",
    "DistanceCalculator",
    "HeuristicEstimator",
    "NeighbourLookup",
    "NullObserver",
    "SearchObserver",
    "NOT_FOUND",
    "Path",
]
