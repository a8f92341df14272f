# tests/conftest.py
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
from PIL import Image

from paparazzo_search.grid import Grid

from tests.graphs import WALL_CELLS, WeightedGraph


@pytest.fixture
def letters_graph():
    edges = [
        ("start", "a", 1.5),
        ("a", "b", 2.0),
        ("c", "b", 3.0),
        ("c", "goal", 4.0),
        ("start", "d", 2.0),
        ("e", "d", 3.0),
        ("e", "goal", 2.0),
    ]
    h = {"a": 4.0, "b": 2.0, "c": 4.0, "d": 4.5, "e": 2.0}
    return WeightedGraph(edges, h)


@pytest.fixture
def walled_grid():
    blocked = np.zeros((10, 10), dtype=bool)
    for r, c in WALL_CELLS:
        blocked[r, c] = True
    return Grid(blocked)


@pytest.fixture
def enclosed_grid():
    return Grid.from_strings([
        "..........",
        "..........",
        "......###.",
        "......#.#.",
        "......###.",
        "..........",
    ])


@pytest.fixture
def map_png(tmp_path):
    """40x30 white map with a vertical wall at column 20 open only at row 2,
    and a closed 5x5 box whose interior is (21..23, 31..33)."""
    img = Image.new("RGB", (40, 30), (255, 255, 255))
    px = img.load()
    for y in range(30):
        if y != 2:
            px[20, y] = (0, 0, 0)
    for x in range(30, 35):
        px[x, 20] = (10, 10, 10)
        px[x, 24] = (10, 10, 10)
    for y in range(20, 25):
        px[30, y] = (10, 10, 10)
        px[34, y] = (10, 10, 10)
    out = tmp_path / "map.png"
    img.save(out)
    return out
