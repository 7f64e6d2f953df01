"""City positions on the map and the shapes drawn between them."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

Point = tuple[float, float]

DEFAULT_COORDINATES: tuple[Point, ...] = (
    (700, 250),
    (245, 195),
    (500, 177),
    (890, 224),
    (488, 165),
    (510, 163),
    (784, 340),
    (920, 470),
    (540, 163),
    (861, 224),
    (815, 265),
)

ARROW_SIZE = 10.0
DASH_WIDTH = 35.0
DASH_HEIGHT = 5.0


@dataclass(frozen=True)
class Arrow:
    """A line from ``start`` to ``end`` with an arrowhead at ``end``.

    ``left`` and ``right`` are None when both ends coincide.
    """

    start: Point
    end: Point
    left: Point | None
    right: Point | None


class CityMap:
    """Map coordinates of the cities, indexed like the city list."""

    def __init__(self, coordinates: Sequence[Point] = DEFAULT_COORDINATES) -> None:
        self._points: tuple[Point, ...] = tuple(
            (float(x), float(y)) for x, y in coordinates
        )

    def __len__(self) -> int:
        return len(self._points)

    def position(self, index: int) -> Point:
        """Return the (x, y) position of city ``index``."""
        if not 0 <= index < len(self._points):
            raise IndexError(f"invalid city index: {index}")
        return self._points[index]

    def distance(self, i: int, j: int) -> int:
        """Straight-line distance between two cities, truncated to whole units."""
        xi, yi = self.position(i)
        xj, yj = self.position(j)
        return int(math.hypot(xi - xj, yi - yj))

    def arrow(self, i: int, j: int) -> Arrow:
        """The arrow drawn for a flight from city ``i`` to city ``j``."""
        start = self.position(i)
        end = self.position(j)
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        length = math.hypot(dx, dy)
        if length == 0:
            return Arrow(start, end, None, None)
        dx /= length
        dy /= length
        perp_x, perp_y = -dy, dx
        base_x = end[0] - dx * ARROW_SIZE
        base_y = end[1] - dy * ARROW_SIZE
        half = ARROW_SIZE * 0.5
        left = (base_x + perp_x * half, base_y + perp_y * half)
        right = (base_x - perp_x * half, base_y - perp_y * half)
        return Arrow(start, end, left, right)

    def dash(self, i: int) -> tuple[float, float, float, float]:
        """The layover marker at city ``i`` as (x, y, width, height)."""
        x, y = self.position(i)
        return (x - 17.0, y - 5.0, DASH_WIDTH, DASH_HEIGHT)