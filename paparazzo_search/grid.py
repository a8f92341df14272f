# region Imports
from __future__ import annotations
import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .config import NEAREST_UNBLOCKED_RADIUS
# endregion

RC = Tuple[int, int]

STEPS_4: Tuple[RC, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
STEPS_8: Tuple[RC, ...] = STEPS_4 + ((-1, -1), (-1, 1), (1, -1), (1, 1))


# region Grid Model
class Grid:
    """Boolean obstacle mask of shape (H, W); True = wall. Nodes are (row, col) tuples."""

    def __init__(self, blocked: np.ndarray):
        blocked = np.asarray(blocked, dtype=bool)
        if blocked.ndim != 2:
            raise ValueError(f"blocked mask must be 2-D, got shape {blocked.shape}")
        self.blocked = blocked
        self.H, self.W = blocked.shape

    @classmethod
    def empty(cls, H: int, W: int) -> "Grid":
        return cls(np.zeros((H, W), dtype=bool))

    @classmethod
    def from_strings(cls, rows: Sequence[str], wall: str = "#") -> "Grid":
        if not rows:
            raise ValueError("at least one row is required")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("all rows must have the same length")
        return cls(np.array([[ch == wall for ch in r] for r in rows], dtype=bool))

    @property
    def shape(self) -> RC:
        return self.H, self.W

    def in_bounds(self, rc: RC) -> bool:
        r, c = rc
        return 0 <= r < self.H and 0 <= c < self.W

    def is_blocked(self, rc: RC) -> bool:
        r, c = rc
        return bool(self.blocked[r, c])

    def passable(self, rc: RC) -> bool:
        return self.in_bounds(rc) and not self.is_blocked(rc)

    def free_cells(self) -> List[RC]:
        return [tuple(int(v) for v in rc) for rc in np.argwhere(~self.blocked)]

    def __repr__(self) -> str:
        return f"Grid(H={self.H}, W={self.W}, walls={int(self.blocked.sum())})"
# endregion


# region Neighbour Generation
class GridNeighbours:
    """In-bounds, unblocked neighbours of a cell; 4- or 8-connected.

    With ``diagonal=True`` a diagonal step needs both orthogonal cells it
    passes between to be free, unless ``corner_cutting`` is set, in which
    case only the target cell is checked and the search may slip through a
    seam where two walls touch at a corner.
    """

    def __init__(self, grid: Grid, diagonal: bool = False, corner_cutting: bool = False):
        self.grid = grid
        self.diagonal = diagonal
        self.corner_cutting = corner_cutting
        self.steps = STEPS_8 if diagonal else STEPS_4

    def get_neighbours(self, node: RC) -> List[RC]:
        r, c = node
        passable = self.grid.passable
        nbrs = []
        for dr, dc in self.steps:
            rc = (r + dr, c + dc)
            if not passable(rc):
                continue
            if dr and dc and not self.corner_cutting:
                if not (passable((r + dr, c)) and passable((r, c + dc))):
                    continue
            nbrs.append(rc)
        return nbrs

    __call__ = get_neighbours
# endregion


# region Metrics
# Each works as a heuristic estimator and as a distance calculator.
def manhattan(a: RC, b: RC) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def euclidean(a: RC, b: RC) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def octile(a: RC, b: RC) -> float:
    dr, dc = abs(a[0] - b[0]), abs(a[1] - b[1])
    return float(max(dr, dc) + (math.sqrt(2.0) - 1.0) * min(dr, dc))
# endregion


# region Nearest Unblocked Cell Search
def nearest_unblocked(
    grid: Grid,
    rc: RC,
    max_radius: int = NEAREST_UNBLOCKED_RADIUS,
) -> RC:
    """Closest free cell to ``rc`` within a square of ``max_radius``.

    Returns ``rc`` itself when it is free or when nothing free is in reach.
    Raises ``ValueError`` for cells off the grid.
    """
    if not grid.in_bounds(rc):
        raise ValueError(f"{rc} is outside the {grid.H}x{grid.W} map")
    if not grid.is_blocked(rc):
        return rc

    r, c = rc
    for rad in range(1, max_radius + 1):
        r0, c0 = max(0, r - rad), max(0, c - rad)
        window = grid.blocked[r0:r + rad + 1, c0:c + rad + 1]
        free = np.argwhere(~window)
        if free.size:
            d2 = (free[:, 0] + r0 - r) ** 2 + (free[:, 1] + c0 - c) ** 2
            rr, cc = free[int(np.argmin(d2))]
            return int(rr) + r0, int(cc) + c0

    return rc
# endregion


def path_cells_blocked(grid: Grid, cells: Iterable[RC]) -> List[RC]:
    """Cells of ``cells`` that are walls or out of bounds."""
    return [rc for rc in cells if not grid.passable(rc)]
