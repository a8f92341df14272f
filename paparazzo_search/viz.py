# region Imports
from __future__ import annotations
from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from .grid import Grid
from .path import NOT_FOUND
# endregion


# region Visualization Function
def show_search(
    grid: Grid,
    path=None,
    *,
    expanded_order: Optional[Sequence[Tuple[int, int]]] = None,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
    title: str = "A* search",
    show: bool = True,
):
    """
    Render walls, optional A* expansion overlay, and the found path.
    ``start``/``goal`` default to the path's ends. Returns the figure.
    """
    H, W = grid.shape
    if path is NOT_FOUND:
        path = None
    if path is not None:
        start = path.start if start is None else start
        goal = path.goal if goal is None else goal

    fig, ax = plt.subplots(figsize=(8, 8 * H / max(W, 1)))
    ax.imshow(grid.blocked.astype(np.uint8), origin="upper", cmap="gray_r", interpolation="nearest")

    # region Expansion Heat Overlay
    if expanded_order:
        order_map = np.full((H, W), np.nan, dtype=np.float32)
        for i, (r, c) in enumerate(expanded_order):
            if 0 <= r < H and 0 <= c < W:
                order_map[r, c] = i + 1
        order_map /= max(1.0, float(np.nanmax(order_map)))
        heat = ax.imshow(order_map, origin="upper", cmap="viridis", alpha=0.6,
                         interpolation="nearest")
        cbar = fig.colorbar(heat, ax=ax, fraction=0.046, pad=0.04)
        cbar.set_label("A* expansion (early → late)")
    # endregion

    # region Path Overlay
    if path is not None:
        ys, xs = zip(*path)
        ax.plot(xs, ys, color="red", linewidth=2.0, label="A* path")
    if start is not None:
        ax.scatter(start[1], start[0], s=80, edgecolors="black", facecolors="lime", zorder=3)
    if goal is not None:
        ax.scatter(goal[1], goal[0], s=80, edgecolors="black", facecolors="yellow", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], color="red", lw=2, label="A* path"),
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="lime", markeredgecolor="black", markersize=9),
        Line2D([0], [0], marker="o", color="w", label="Goal",
               markerfacecolor="yellow", markeredgecolor="black", markersize=9),
        Patch(facecolor="black", edgecolor="black", label="Wall"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_axis_off()
    fig.tight_layout()
    if show:
        plt.show()
    return fig
    # endregion
# endregion
