# region Imports
from __future__ import annotations
import logging
from typing import Tuple

import numpy as np
from PIL import Image

from .config import WHITE
from .grid import Grid
# endregion

logger = logging.getLogger(__name__)


# region Bitmap Loading
def image_to_blocked(img: Image.Image, floor: Tuple[int, int, int] = WHITE) -> np.ndarray:
    """Boolean (H, W) mask, True where the pixel differs from ``floor``."""
    rgb = np.asarray(img.convert("RGB"), dtype=np.uint8)
    return np.any(rgb != np.asarray(floor, dtype=np.uint8), axis=-1)


def load_grid(source, *, floor: Tuple[int, int, int] = WHITE) -> Grid:
    """Read an image (path or file object) and return its :class:`Grid`."""
    with Image.open(source) as img:
        blocked = image_to_blocked(img, floor)
    grid = Grid(blocked)
    logger.info(
        "Loaded %dx%d map, %d wall cells (%.1f%%)",
        grid.W,
        grid.H,
        int(blocked.sum()),
        100.0 * wall_ratio(grid),
    )
    return grid


def wall_ratio(grid: Grid) -> float:
    size = grid.H * grid.W
    return float(grid.blocked.sum()) / size if size else 0.0
# endregion


# region Bitmap Writing
def grid_to_image(grid: Grid, floor: Tuple[int, int, int] = WHITE) -> Image.Image:
    """Inverse of :func:`image_to_blocked`: walls black, floor ``floor``."""
    rgb = np.zeros((grid.H, grid.W, 3), dtype=np.uint8)
    rgb[~grid.blocked] = floor
    return Image.fromarray(rgb, "RGB")
# endregion
