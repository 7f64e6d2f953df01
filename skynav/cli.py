"""The interactive menu for searching and booking flights."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping, Sequence

from .booking import (
    BookingError,
    Console,
    Leg,
    book_direct_flight,
    book_indirect_flight,
    cheapest_trip,
    custom_flight_search,
    layover_trip,
    multi_leg_trip,
    shortest_trip,
)
from .flights import FlightGraph, build_graph
from .geometry import CityMap
from .layover import load_hotel_charges

MENU = (
    "Enter 1 to book direct flights,",
    "2 to book indirect flights,",
    "3 to see lowest cost flights from your city to destination city,",
    "4 to make custom flight",
    "5 to book flights with layover,",
    "6 to build multi-legged trip,",
    "7 to see shortest distance flights from your city to destination city,",
    "8 to quit: ",
)
LAYOVER_CHOICE = 5
QUIT_CHOICE = 8


def render_legs(legs: Sequence[Leg], city_map: CityMap, names: Sequence[str]) -> list[str]:
    """Describe each leg as a line from one city's map position to another's."""
    lines = []
    for origin, destination in legs:
        arrow = city_map.arrow(origin, destination)
        (sx, sy), (ex, ey) = arrow.start, arrow.end
        lines.append(
            f"{names[origin]} -> {names[destination]}: "
            f"({sx:g}, {sy:g}) to ({ex:g}, {ey:g})"
        )
    return lines


def _indirect(graph: FlightGraph, console: Console) -> list[Leg]:
    source = console.ask("Enter source city\n")
    destination = console.ask("Enter destination city\n")
    return book_indirect_flight(graph, console, source, destination)


def run_menu(
    graph: FlightGraph,
    console: Console,
    city_map: CityMap | None = None,
    hotel_charges: Mapping[int, int] | None = None,
) -> None:
    """Offer the menu until the traveller quits or input runs out."""
    city_map = city_map if city_map is not None else CityMap()
    charges = dict(hotel_charges or {})
    actions: dict[int, Callable[[], list[Leg]]] = {
        1: lambda: book_direct_flight(graph, console),
        2: lambda: _indirect(graph, console),
        3: lambda: cheapest_trip(graph, console),
        4: lambda: custom_flight_search(graph, console),
        5: lambda: layover_trip(graph, console, charges),
        6: lambda: multi_leg_trip(graph, console),
        7: lambda: shortest_trip(graph, console, city_map),
    }
    while True:
        for line in MENU:
            console.say(line)
        try:
            choice = console.ask_int()
            if choice == QUIT_CHOICE:
                console.say("THANK YOU")
                return
            action = actions.get(choice)
            if action is None:
                continue
            legs = action()
        except BookingError as error:
            console.say(str(error))
            continue
        except EOFError:
            return
        for line in render_legs(legs, city_map, graph.city_names):
            console.say(line)
        if choice == LAYOVER_CHOICE:
            for _, stop in legs[:-1]:
                x, y, width, height = city_map.dash(stop)
                console.say(
                    f"Layover at {graph.city_names[stop]}: "
                    f"({x:g}, {y:g}) {width:g}x{height:g}"
                )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="skynav", description="Search and book flights.")
    parser.add_argument("--flights", default="Flights.txt", help="flight schedule file")
    parser.add_argument(
        "--hotels", default="HotelCharges_perday.txt", help="hotel prices per day"
    )
    args = parser.parse_args(argv)
    try:
        graph = build_graph(args.flights)
    except OSError:
        print("Error in opening file.")
        return 1
    try:
        charges = load_hotel_charges(args.hotels)
    except OSError:
        print("Error in opening file.")
        charges = {}
    run_menu(graph, Console(sys.stdin, sys.stdout), CityMap(), charges)
    return 0


if __name__ == "__main__":
    sys.exit(main())