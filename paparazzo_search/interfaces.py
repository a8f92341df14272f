# region Imports
from __future__ import annotations
from typing import Any, Callable, Hashable, Iterable, Protocol, TypeVar, Union, runtime_checkable
# endregion

T = TypeVar("T", bound=Hashable)


# region Strategy Protocols
@runtime_checkable
class HeuristicEstimator(Protocol[T]):
    """Lower bound on the remaining cost from ``node`` to ``goal``."""

    def estimate(self, node: T, goal: T) -> float: ...


@runtime_checkable
class NeighbourLookup(Protocol[T]):
    """Nodes adjacent to ``node``. Called once per expansion."""

    def get_neighbours(self, node: T) -> Iterable[T]: ...


@runtime_checkable
class DistanceCalculator(Protocol[T]):
    """Edge cost between two adjacent nodes."""

    def get_distance_between(self, a: T, b: T) -> float: ...


@runtime_checkable
class SearchObserver(Protocol[T]):
    def added_to_open_set(self, node: T) -> None: ...

    def added_to_closed_set(self, node: T) -> None: ...

    def updated_g_cost(self, node: T, cost: float) -> None: ...
# endregion


# region No-op Observer
class NullObserver:
    """Observer that ignores every notification."""

    def added_to_open_set(self, node) -> None:
        pass

    def added_to_closed_set(self, node) -> None:
        pass

    def updated_g_cost(self, node, cost: float) -> None:
        pass
# endregion


# region Callable Adapters
EstimatorLike = Union[HeuristicEstimator, Callable[[Any, Any], float]]
NeighbourLike = Union[NeighbourLookup, Callable[[Any], Iterable[Any]]]
DistanceLike = Union[DistanceCalculator, Callable[[Any, Any], float]]


def bind_strategy(strategy: Any, method: str) -> Callable:
    """Return ``strategy.<method>`` or ``strategy`` itself when it is a plain callable."""
    bound = getattr(strategy, method, None)
    if bound is not None:
        return bound
    if callable(strategy):
        return strategy
    raise TypeError(
        f"{type(strategy).__name__} is neither callable nor provides {method}()"
    )
# endregion
