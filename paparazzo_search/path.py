# region Imports
from __future__ import annotations
from typing import Callable, Generic, Hashable, Iterator, List, Tuple, TypeVar
# endregion

T = TypeVar("T", bound=Hashable)


# region Path
class Path(Generic[T]):
    """Ordered nodes from start to goal, inclusive. Never empty."""

    __slots__ = ("_nodes",)

    def __init__(self, node: T):
        self._nodes: List[T] = [node]

    @classmethod
    def from_nodes(cls, nodes) -> "Path[T]":
        it = iter(nodes)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("a path needs at least one node") from None
        path = cls(first)
        for node in it:
            path.add(node)
        return path

    def add(self, node: T) -> None:
        self._nodes.append(node)

    @property
    def start(self) -> T:
        return self._nodes[0]

    @property
    def goal(self) -> T:
        return self._nodes[-1]

    @property
    def nodes(self) -> Tuple[T, ...]:
        return tuple(self._nodes)

    def total_cost(self, distance: Callable[[T, T], float]) -> float:
        """Sum of ``distance(a, b)`` over consecutive node pairs."""
        measure = getattr(distance, "get_distance_between", distance)
        return float(sum(measure(a, b) for a, b in zip(self._nodes, self._nodes[1:])))

    def __iter__(self) -> Iterator[T]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, i):
        return self._nodes[i]

    def __contains__(self, node) -> bool:
        return node in self._nodes

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._nodes == other._nodes

    __hash__ = None  # mutable via add()

    def __repr__(self) -> str:
        return f"Path({self._nodes!r})"
# endregion


# region Not-found Sentinel
class _NotFound:
    """Result of a search whose goal is unreachable."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return "NOT_FOUND"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()
# endregion
