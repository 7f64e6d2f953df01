"""The fixed set of cities served by the network."""

from __future__ import annotations

CITIES: tuple[str, ...] = (
    "Islamabad",
    "Newyork",
    "Paris",
    "Tokyo",
    "London",
    "Amsterdam",
    "Singapore",
    "Sydney",
    "Berlin",
    "Seoul",
    "HongKong",
)

_INDEX = {name: index for index, name in enumerate(CITIES)}


class UnknownCityError(LookupError):
    """Raised for a city name or index that is not in the network."""


def find_city(name: str) -> int | None:
    """Return the index of ``name``, or None if the city is unknown."""
    return _INDEX.get(name)


def city_index(name: str) -> int:
    """Return the index of ``name``; raise UnknownCityError if unknown."""
    index = find_city(name)
    if index is None:
        raise UnknownCityError(f"unknown city: {name!r}")
    return index


def city_name(index: int) -> str:
    """Return the name of the city at ``index``."""
    if not 0 <= index < len(CITIES):
        raise UnknownCityError(f"unknown city index: {index}")
    return CITIES[index]