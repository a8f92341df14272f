import io

import numpy as np
import pytest
from PIL import Image

from paparazzo_search import AStar, NOT_FOUND
from paparazzo_search.bitmap import grid_to_image, image_to_blocked, load_grid, wall_ratio
from paparazzo_search.caching import CachingNeighbourLookup
from paparazzo_search.grid import Grid, GridNeighbours, manhattan


@pytest.fixture
def map_engine(map_png):
    grid = load_grid(map_png)
    lookup = CachingNeighbourLookup(GridNeighbours(grid, diagonal=True))
    return grid, AStar(manhattan, lookup, manhattan)


def test_load_grid_marks_non_white_as_wall(map_png):
    grid = load_grid(map_png)
    assert grid.shape == (30, 40)
    assert grid.is_blocked((0, 20))
    assert not grid.is_blocked((2, 20))
    assert grid.is_blocked((20, 30))
    assert not grid.is_blocked((22, 32))
    assert wall_ratio(grid) == pytest.approx((29 + 16) / (30 * 40))


def test_search_around_wall(map_engine):
    grid, engine = map_engine
    path = engine.search((15, 5), (15, 35))
    assert path is not NOT_FOUND
    assert (2, 20) in path
    assert not any(grid.is_blocked(rc) for rc in path)


def test_impossible_search(map_engine):
    _, engine = map_engine
    assert engine.search((5, 5), (22, 32)) is NOT_FOUND


def test_image_to_blocked_handles_greyscale_and_alpha():
    img = Image.new("LA", (3, 2), (255, 255))
    img.putpixel((1, 1), (0, 255))
    blocked = image_to_blocked(img)
    assert blocked.shape == (2, 3)
    assert blocked.tolist() == [[False, False, False], [False, True, False]]


def test_grid_image_round_trip_through_file_object():
    grid = Grid.from_strings([".#.", "..#"])
    buf = io.BytesIO()
    grid_to_image(grid).save(buf, "PNG")
    buf.seek(0)
    loaded = load_grid(buf)
    assert np.array_equal(loaded.blocked, grid.blocked)
