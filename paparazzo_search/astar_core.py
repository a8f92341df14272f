# region Imports
from __future__ import annotations
import heapq
import itertools
import logging
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar, Union

from .interfaces import (
    DistanceLike,
    EstimatorLike,
    NeighbourLike,
    NullObserver,
    SearchObserver,
    bind_strategy,
)
from .path import NOT_FOUND, Path, _NotFound
# endregion

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


# region Node Bookkeeping
class NodeRecord:
    """Search-time data for one discovered node."""

    __slots__ = ("node", "g", "h", "parent", "closed", "entry")

    def __init__(self, node, g: float, h: float, parent=None):
        self.node = node
        self.g = g
        self.h = h
        self.parent = parent
        self.closed = False
        # live heap entry while the node sits in the open set, else None
        self.entry: Optional[list] = None

    @property
    def f(self) -> float:
        return self.g + self.h

    def __repr__(self) -> str:
        return f"NodeRecord({self.node!r}, g={self.g}, h={self.h}, parent={self.parent!r})"


class _Frontier:
    """Open set: heapq list of ``[f, h, counter, record]`` with in-place invalidation.

    A record owns at most one live entry. Repositioning blanks the old
    entry's record slot and pushes a fresh one; blank entries are dropped
    on pop.
    """

    def __init__(self):
        self._heap: List[list] = []
        self._counter = itertools.count()
        self._live = 0

    def __len__(self) -> int:
        return self._live

    def __contains__(self, record: NodeRecord) -> bool:
        return record.entry is not None

    def push(self, record: NodeRecord) -> None:
        if record.entry is not None:
            record.entry[-1] = None
            self._live -= 1
        entry = [record.f, record.h, next(self._counter), record]
        record.entry = entry
        heapq.heappush(self._heap, entry)
        self._live += 1

    def pop(self) -> NodeRecord:
        while self._heap:
            *_, record = heapq.heappop(self._heap)
            if record is not None:
                record.entry = None
                self._live -= 1
                return record
        raise KeyError("pop from an empty frontier")
# endregion


# region Path Reconstruction
def reconstruct(records: Dict[Any, NodeRecord], goal) -> Path:
    trail = []
    record: Optional[NodeRecord] = records[goal]
    while record is not None:
        trail.append(record.node)
        record = records[record.parent] if record.parent is not None else None
    trail.reverse()
    return Path.from_nodes(trail)
# endregion


# region A* Engine
class AStar(Generic[T]):
    """Best-first A* search over caller-defined nodes.

    Strategies may be objects implementing the protocols in
    :mod:`paparazzo_search.interfaces` or plain callables:

      * ``estimator(node, goal) -> float``: admissible lower bound.
      * ``neighbour_lookup(node) -> iterable of nodes``.
      * ``distance_calculator(a, b) -> float``: non-negative edge cost.

    Equal ``f`` candidates are popped by lower ``h`` first, then in
    insertion order. Closed nodes are never reopened, so a consistent
    heuristic is required for optimality.

    The engine keeps no per-search state; one instance can serve many
    searches, including concurrent ones when the strategies allow it.
    """

    def __init__(
        self,
        estimator: EstimatorLike,
        neighbour_lookup: NeighbourLike,
        distance_calculator: DistanceLike,
        observer: Optional[SearchObserver] = None,
    ):
        self._estimate = bind_strategy(estimator, "estimate")
        self._neighbours = bind_strategy(neighbour_lookup, "get_neighbours")
        self._distance = bind_strategy(distance_calculator, "get_distance_between")
        self._observer = observer if observer is not None else NullObserver()

    @property
    def observer(self) -> SearchObserver:
        return self._observer

    def search(self, start: T, goal: T) -> Union[Path[T], _NotFound]:
        """Return the cheapest :class:`Path` from ``start`` to ``goal`` or ``NOT_FOUND``."""
        observer = self._observer
        records: Dict[T, NodeRecord] = {}
        frontier = _Frontier()

        first = NodeRecord(start, 0.0, self._estimate(start, goal))
        records[start] = first
        frontier.push(first)
        observer.added_to_open_set(start)

        while frontier:
            current = frontier.pop()
            x = current.node
            logger.debug("Current node is %r, retrieved from the open set", x)

            if x == goal:
                path = reconstruct(records, x)
                logger.debug("At goal, reconstructed path is %r", path)
                return path

            current.closed = True
            observer.added_to_closed_set(x)

            # region Neighbour Loop
            for y in self._neighbours(x):
                known = records.get(y)
                if known is not None and known.closed:
                    continue

                tentative_g = current.g + self._distance(x, y)
                logger.debug("Tentative G score for %r is %s", y, tentative_g)

                if known is None or known not in frontier:
                    record = NodeRecord(y, tentative_g, self._estimate(y, goal), x)
                    records[y] = record
                    frontier.push(record)
                    logger.debug("Adding %r to the open set", y)
                    observer.added_to_open_set(y)
                    observer.updated_g_cost(y, tentative_g)
                elif tentative_g < known.g:
                    logger.debug(
                        "Tentative score is better than old score %s < %s, updating",
                        tentative_g,
                        known.g,
                    )
                    known.g = tentative_g
                    known.h = self._estimate(y, goal)
                    known.parent = x
                    frontier.push(known)
                    observer.updated_g_cost(y, tentative_g)
            # endregion

        logger.debug("Open set exhausted without reaching %r", goal)
        return NOT_FOUND
# endregion


# region Functional Entry Point
def astar(
    start,
    goal,
    neighbors_fn: NeighbourLike,
    edge_cost_fn: DistanceLike,
    heuristic_fn: EstimatorLike,
    *,
    observer: Optional[SearchObserver] = None,
):
    """One-shot search without keeping an :class:`AStar` around."""
    return AStar(heuristic_fn, neighbors_fn, edge_cost_fn, observer).search(start, goal)
# endregion
