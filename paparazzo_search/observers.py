"""Search observers: expansion recording, logging and fan-out."""

# region Imports
from __future__ import annotations
import logging
from typing import Any, List, Optional, Tuple
# endregion


# region Expansion Recorder
class ExpansionRecorder:
    """Keep every notification in arrival order.

    ``closed`` is the expansion order, which is what the renderer turns
    into a heat map.
    """

    def __init__(self):
        self.opened: List[Any] = []
        self.closed: List[Any] = []
        self.g_updates: List[Tuple[Any, float]] = []

    def added_to_open_set(self, node) -> None:
        self.opened.append(node)

    def added_to_closed_set(self, node) -> None:
        self.closed.append(node)

    def updated_g_cost(self, node, cost: float) -> None:
        self.g_updates.append((node, cost))

    @property
    def expansions(self) -> int:
        return len(self.closed)

    def reset(self) -> None:
        self.opened.clear()
        self.closed.clear()
        self.g_updates.clear()
# endregion


# region Logging Observer
class LoggingObserver:
    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def added_to_open_set(self, node) -> None:
        self.logger.log(self.level, "open   %r", node)

    def added_to_closed_set(self, node) -> None:
        self.logger.log(self.level, "closed %r", node)

    def updated_g_cost(self, node, cost: float) -> None:
        self.logger.log(self.level, "g      %r = %s", node, cost)
# endregion


# region Composite
class CompositeObserver:
    def __init__(self, *observers):
        self.observers = list(observers)

    def added_to_open_set(self, node) -> None:
        for o in self.observers:
            o.added_to_open_set(node)

    def added_to_closed_set(self, node) -> None:
        for o in self.observers:
            o.added_to_closed_set(node)

    def updated_g_cost(self, node, cost: float) -> None:
        for o in self.observers:
            o.updated_g_cost(node, cost)
# endregion
