import math

import pytest

from skynav.geometry import ARROW_SIZE, CityMap


def test_default_map_positions():
    city_map = CityMap()
    assert len(city_map) == 11
    assert city_map.position(0) == (700.0, 250.0)
    assert city_map.position(7) == (920.0, 470.0)


def test_distance_symmetric_and_zero_on_self():
    city_map = CityMap()
    for i in range(len(city_map)):
        assert city_map.distance(i, i) == 0
        for j in range(len(city_map)):
            assert city_map.distance(i, j) == city_map.distance(j, i)


def test_distance_truncates():
    city_map = CityMap([(0, 0), (3, 4), (1, 1)])
    assert city_map.distance(0, 1) == 5
    assert city_map.distance(0, 2) == int(math.sqrt(2))


@pytest.mark.parametrize("index", [-1, 11])
def test_position_invalid_index(index):
    with pytest.raises(IndexError):
        CityMap().position(index)


def test_arrow_geometry_invariants():
    city_map = CityMap()
    arrow = city_map.arrow(1, 3)
    assert arrow.start == city_map.position(1)
    assert arrow.end == city_map.position(3)
    left, right = arrow.left, arrow.right
    assert math.isclose(math.dist(left, right), ARROW_SIZE)
    assert math.isclose(math.dist(left, arrow.end), math.dist(right, arrow.end))
    mid = ((left[0] + right[0]) / 2, (left[1] + right[1]) / 2)
    assert math.isclose(math.dist(mid, arrow.end), ARROW_SIZE)
    assert math.dist(mid, arrow.start) < math.dist(arrow.end, arrow.start)


def test_arrow_to_self_has_no_head():
    arrow = CityMap().arrow(4, 4)
    assert arrow.left is None and arrow.right is None


def test_arrow_invalid_index():
    with pytest.raises(IndexError):
        CityMap().arrow(0, 12)


def test_dash_centered_on_city():
    city_map = CityMap()
    x, y, width, height = city_map.dash(0)
    cx, cy = city_map.position(0)
    assert (width, height) == (35.0, 5.0)
    assert cx - x == 17.0
    assert cy - y == 5.0


def test_dash_invalid_index():
    with pytest.raises(IndexError):
        CityMap().dash(-1)