"""Flight records, the flight network and route searches over it."""

from __future__ import annotations

import math
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .cities import CITIES, UnknownCityError, find_city
from .minheap import MinHeap, NodeCost

MAX_CITIES = 12
MINUTES_PER_DAY = 24 * 60


def time_to_minutes(text: str) -> int:
    """Convert an ``HH:MM`` time to minutes after midnight."""
    return int(text[0:2]) * 60 + int(text[3:5])


def day_of(date: str) -> int:
    """Return the day of the month from a ``DD/MM/YYYY`` date."""
    return int(date[0:2])


@dataclass
class FlightData:
    """Schedule, price and carrier of a single flight."""

    departure_time: str = ""
    arrival_time: str = ""
    price: int = 0
    airline_name: str = ""
    date: str = ""

    def duration(self) -> float:
        """Flight time in hours; an earlier arrival time means the next day."""
        dep = time_to_minutes(self.departure_time)
        arr = time_to_minutes(self.arrival_time)
        minutes = arr - dep if arr >= dep else MINUTES_PER_DAY - dep + arr
        return minutes / 60.0

    def describe(self) -> str:
        """One-line summary of the flight."""
        return (
            f"Date {self.date}, Departure: {self.departure_time}, "
            f"Arrival: {self.arrival_time}, Price: {self.price}, "
            f"Airline: {self.airline_name}, Duration: {self.duration():g} hours"
        )


@dataclass
class Flight:
    """A flight leaving ``origin`` for ``destination``."""

    origin: int
    destination: int
    data: FlightData


@dataclass
class Route:
    """The result of a route search between two cities."""

    source: int
    destination: int
    cost: float
    legs: list[tuple[int, int]] = field(default_factory=list)
    flights: list[Flight] = field(default_factory=list)


class FlightGraph:
    """Directed graph of cities joined by scheduled flights."""

    def __init__(self, num_cities: int) -> None:
        if num_cities < 0:
            raise ValueError("number of cities must not be negative")
        self.num_cities = num_cities
        self.city_names: list[str] = [""] * num_cities
        self._adjacency: list[list[Flight]] = [[] for _ in range(num_cities)]

    def _check(self, index: int) -> int:
        if not 0 <= index < self.num_cities:
            raise UnknownCityError(f"unknown city index: {index}")
        return index

    def set_city_name(self, index: int, name: str) -> None:
        self.city_names[self._check(index)] = name

    def add_flight(self, origin: int, destination: int, data: FlightData) -> Flight:
        """Add a flight; the newest flight from a city is listed first."""
        self._check(origin)
        self._check(destination)
        flight = Flight(origin, destination, data)
        self._adjacency[origin].insert(0, flight)
        return flight

    def flights_from(self, origin: int) -> list[Flight]:
        """All flights leaving ``origin``, newest first."""
        return list(self._adjacency[self._check(origin)])

    def _between(self, origin: int, destination: int) -> Iterator[Flight]:
        self._check(destination)
        return (f for f in self._adjacency[self._check(origin)] if f.destination == destination)

    def flights_between(self, origin: int, destination: int) -> list[Flight]:
        """Flights from ``origin`` to ``destination``, in listing order."""
        return list(self._between(origin, destination))

    def count_flights(self, origin: int, destination: int) -> int:
        return sum(1 for _ in self._between(origin, destination))

    def choose_flight(self, origin: int, destination: int, number: int) -> Flight | None:
        """The ``number``-th (from 1) flight between two cities, or None."""
        for position, flight in enumerate(self._between(origin, destination), start=1):
            if position == number:
                return flight
        return None

    def nth_flight_from(self, origin: int, number: int) -> Flight | None:
        """The ``number``-th flight from ``origin`` whatever its destination.

        Numbers below 1 select the first flight; None when there are too few.
        """
        flights = self._adjacency[self._check(origin)]
        position = max(number, 1) - 1
        return flights[position] if position < len(flights) else None

    def first_flight(self, origin: int, destination: int) -> Flight | None:
        """The first listed flight between two cities, or None."""
        return next(self._between(origin, destination), None)

    def _search(
        self, source: int, destination: int, weight: Callable[[Flight], float]
    ) -> Route | None:
        self._check(source)
        self._check(destination)
        min_cost = [math.inf] * self.num_cities
        processed = [False] * self.num_cities
        previous = [-1] * self.num_cities
        min_cost[source] = 0.0

        heap = MinHeap(self.num_cities)
        heap.insert(NodeCost(source, 0.0))
        while not heap.empty():
            city = heap.extract_min().city_index
            if processed[city]:
                continue
            processed[city] = True
            if city == destination:
                break
            for flight in self._adjacency[city]:
                neighbor = flight.destination
                new_cost = min_cost[city] + weight(flight)
                if new_cost < min_cost[neighbor]:
                    min_cost[neighbor] = new_cost
                    previous[neighbor] = city
                    heap.insert(NodeCost(neighbor, new_cost))

        if math.isinf(min_cost[destination]):
            return None

        legs: list[tuple[int, int]] = []
        city = destination
        while previous[city] != -1:
            legs.append((previous[city], city))
            city = previous[city]
        legs.reverse()
        flights = [
            flight
            for flight in (self.first_flight(a, b) for a, b in legs)
            if flight is not None
        ]
        return Route(source, destination, min_cost[destination], legs, flights)

    def cheapest_route(self, source: int, destination: int) -> Route | None:
        """Lowest-price route between two cities, or None if unreachable."""
        return self._search(source, destination, lambda f: f.data.price)

    def shortest_route(
        self, source: int, destination: int, distance: Callable[[int, int], float]
    ) -> Route | None:
        """Shortest route by ``distance(i, j)`` per flight, or None if unreachable."""
        return self._search(source, destination, lambda f: distance(f.origin, f.destination))

    def layover_options(
        self, origin: int, destination: int, arrival: FlightData, staytime: float
    ) -> list[Flight]:
        """Flights onward from ``origin`` that leave after a stay of ``staytime`` hours."""
        arrival_day = day_of(arrival.date)
        earliest = staytime * 60 + time_to_minutes(arrival.arrival_time)
        return [
            flight
            for flight in self._between(origin, destination)
            if day_of(flight.data.date) >= arrival_day
            and time_to_minutes(flight.data.departure_time) > earliest
        ]

    def connecting_cities(self, source: int, destination: int) -> list[int]:
        """Cities reachable directly from ``source`` with a direct flight to ``destination``."""
        self._check(source)
        self._check(destination)
        return [
            stop
            for stop in range(self.num_cities)
            if stop not in (source, destination)
            and self.count_flights(source, stop) > 0
            and self.count_flights(stop, destination) > 0
        ]


def load_flights(graph: FlightGraph, path: str | os.PathLike[str]) -> int:
    """Add flights from a whitespace-separated file; return how many were added.

    Each record is ``origin destination date departure arrival price airline``.
    Records naming an unknown city are skipped.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    added = 0
    for start in range(0, len(tokens) - 6, 7):
        origin, destination, date, dep, arr, price, airline = tokens[start:start + 7]
        value = int(price)
        o = find_city(origin)
        d = find_city(destination)
        if o is None or d is None:
            continue
        graph.add_flight(o, d, FlightData(dep, arr, value, airline, date))
        added += 1
    return added


def build_graph(path: str | os.PathLike[str]) -> FlightGraph:
    """Create the network with its named cities and load flights from ``path``."""
    graph = FlightGraph(MAX_CITIES)
    for index, name in enumerate(CITIES):
        graph.set_city_name(index, name)
    load_flights(graph, path)
    return graph