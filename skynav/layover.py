"""Queue of layover stops with their hotel charges."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .cities import find_city


@dataclass
class LayoverStop:
    """A city on the route, the hours spent there and its hotel price per day."""

    city_index: int
    staytime: int
    charges: int


def load_hotel_charges(path: str | os.PathLike[str]) -> dict[int, int]:
    """Read ``city price`` pairs and map city index to price per day.

    Unknown cities are skipped; a later entry for a city replaces an earlier one.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    charges: dict[int, int] = {}
    for place, price in zip(tokens[0::2], tokens[1::2]):
        value = int(price)
        index = find_city(place)
        if index is not None:
            charges[index] = value
    return charges


class LayoverQueue:
    """First-in, first-out sequence of layover stops."""

    def __init__(self, hotel_charges: Mapping[int, int] | None = None) -> None:
        self._charges = dict(hotel_charges or {})
        self._stops: deque[LayoverStop] = deque()

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[LayoverStop]:
        return iter(self._stops)

    def enqueue(self, city_index: int, staytime: float) -> LayoverStop:
        """Append a stop; the stay is kept in whole hours."""
        stop = LayoverStop(
            city_index=city_index,
            staytime=int(staytime),
            charges=self._charges.get(city_index, 0),
        )
        self._stops.append(stop)
        return stop

    def dequeue(self) -> LayoverStop | None:
        """Remove and return the first stop, or None when the queue is empty."""
        return self._stops.popleft() if self._stops else None

    def is_empty(self) -> bool:
        return not self._stops

    def front(self) -> LayoverStop | None:
        """The first stop, or None."""
        return self._stops[0] if self._stops else None

    def next_stop(self) -> LayoverStop | None:
        """The stop after the first one, or None."""
        return self._stops[1] if len(self._stops) > 1 else None