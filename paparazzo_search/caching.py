# region Imports
from __future__ import annotations
from typing import Any, Dict, Hashable, NamedTuple, Tuple

from .interfaces import NeighbourLike, bind_strategy
# endregion


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    size: int


# region Memoizing Neighbour Lookup
class CachingNeighbourLookup:
    """Wrap a neighbour lookup and remember each node's neighbours.

    Entries are filled on first access and never evicted; call
    :meth:`clear` when the underlying graph changes.
    """

    def __init__(self, lookup: NeighbourLike):
        self._lookup = bind_strategy(lookup, "get_neighbours")
        self._cache: Dict[Hashable, Tuple[Any, ...]] = {}
        self._hits = 0
        self._misses = 0

    def get_neighbours(self, node) -> Tuple[Any, ...]:
        try:
            nbrs = self._cache[node]
        except KeyError:
            self._misses += 1
            nbrs = self._cache[node] = tuple(self._lookup(node))
        else:
            self._hits += 1
        return nbrs

    __call__ = get_neighbours

    def cache_info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, len(self._cache))

    def clear(self) -> None:
        self._cache.clear()
        self._hits = self._misses = 0
# endregion
