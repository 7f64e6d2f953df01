"""Interactive booking flows over the flight network."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Mapping
from typing import TextIO

from .cities import find_city
from .flights import Flight, FlightData, FlightGraph, Route
from .geometry import CityMap
from .layover import LayoverQueue, LayoverStop

Leg = tuple[int, int]


class BookingError(Exception):
    """Raised when a booking cannot go ahead with the input given."""


class Console:
    """Reads whitespace-separated answers and writes prompts and messages."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def ask(self, prompt: str = "") -> str:
        """Show ``prompt`` and return the next word of input; EOFError at the end."""
        if prompt:
            self._out.write(prompt)
            self._out.flush()
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def ask_int(self, prompt: str = "") -> int:
        """Ask for a whole number."""
        token = self.ask(prompt)
        try:
            return int(token)
        except ValueError:
            raise BookingError(f"Expected a number, got {token!r}") from None

    def say(self, text: str = "") -> None:
        """Write one line of output."""
        self._out.write(text + "\n")


def _ask_float(console: Console, prompt: str) -> float:
    token = console.ask(prompt)
    try:
        return float(token)
    except ValueError:
        raise BookingError(f"Expected a number, got {token!r}") from None


def _show_trip(graph: FlightGraph, console: Console, origin: int, destination: int) -> None:
    console.say(f"Flights from {graph.city_names[origin]}:")
    for flight in graph.flights_between(origin, destination):
        console.say("  " + flight.data.describe())


def _book_listed(
    graph: FlightGraph, console: Console, origin: int, from_name: str, to_name: str
) -> Flight:
    if console.ask_int("Enter 1 to book one of these flights: ") != 1:
        raise BookingError("Invalid Choice")
    number = console.ask_int("Enter the flight number you want to book: ")
    flight = graph.nth_flight_from(origin, number)
    if flight is None:
        raise BookingError("Invalid flight number")
    data = flight.data
    console.say("Flight Booked")
    console.say("Flight itinerary:::")
    console.say(f"Departure: {from_name} Time(GMT+5)::{data.departure_time}")
    console.say(f"Destination: {to_name} Time(GMT+5)::{data.arrival_time}")
    console.say(f"Airline: {data.airline_name}")
    return flight


def _cities(*names: str, message: str) -> list[int]:
    indices = [find_city(name) for name in names]
    if any(index is None for index in indices):
        raise BookingError(message)
    return [index for index in indices if index is not None]


def book_direct_flight(graph: FlightGraph, console: Console) -> list[Leg]:
    """Book a non-stop flight; return the booked leg."""
    source = console.ask("Enter the source city: ")
    destination = console.ask("Enter the destination city: ")
    s, d = _cities(source, destination, message="Invalid source or destination")
    if graph.count_flights(s, d) == 0:
        raise BookingError(
            "No direct flights available\n"
            "You are now being rerouted to check for indirect flights"
        )
    console.say("These are all the direct flights available:::")
    _show_trip(graph, console, s, d)
    _book_listed(graph, console, s, source, destination)
    return [(s, d)]


def book_indirect_flight(
    graph: FlightGraph, console: Console, source: str, destination: str
) -> list[Leg]:
    """Book a trip through one connecting city; return its two legs."""
    s, d = _cities(source, destination, message="Invalid source or destination")
    connecting = graph.connecting_cities(s, d)
    if not connecting:
        raise BookingError("No connecting cities available")
    console.say("These are the connecting cities available:::")
    for number, city in enumerate(connecting, start=1):
        console.say(f"{number}. {graph.city_names[city]}")
    chosen = console.ask_int("Enter the number of the city you want to connect through: ")
    if not 1 <= chosen <= len(connecting):
        raise BookingError("Invalid Choice")
    stop = connecting[chosen - 1]
    console.say(f"Flights from {graph.city_names[stop]} to {graph.city_names[d]}:")
    _show_trip(graph, console, stop, d)
    _book_listed(graph, console, stop, graph.city_names[s], graph.city_names[d])
    return [(s, stop), (stop, d)]


def custom_flight_search(graph: FlightGraph, console: Console) -> list[Leg]:
    """Find flights of one airline through a chosen stop; return the legs found."""
    source = console.ask("Enter the source city: ")
    destination = console.ask("Enter the destination city: ")
    stop = console.ask("Enter the stop city: ")
    airline = console.ask("Enter the airline name: ")
    s, d, mid = _cities(
        source, destination, stop, message="Invalid source, stop, or destination city"
    )
    console.say(f"Checking for flights connecting with {stop} on {airline} Airways:")
    legs = [
        (s, mid) for f in graph.flights_between(s, mid) if f.data.airline_name == airline
    ]
    legs += [
        (mid, d) for f in graph.flights_between(mid, d) if f.data.airline_name == airline
    ]
    if legs:
        console.say("Flights Found! They will be visualized on the map.")
    else:
        console.say("No custom flights found")
    return legs


def multi_leg_trip(graph: FlightGraph, console: Console) -> list[Leg]:
    """Book legs one after another until the traveller types ``end``."""
    source = console.ask("Enter the source city: ")
    s = find_city(source)
    if s is None:
        raise BookingError("Invalid source city")
    booked: list[tuple[str, str, FlightData]] = []
    legs: list[Leg] = []
    while True:
        console.say(f"You are currently at {source}")
        stop_name = console.ask("Enter your next stop or type 'end' to finish: ")
        if stop_name == "end":
            console.say("End of trip")
            break
        stop = find_city(stop_name)
        if stop is None:
            console.say("Invalid stop city")
            continue
        if graph.count_flights(s, stop) == 0:
            console.say(f"No flights available from {source} to {stop_name}")
            continue
        console.say(f"Flights from {source} to {stop_name}:")
        _show_trip(graph, console, s, stop)
        number = console.ask_int("Enter the flight number you want to book: ")
        flight = graph.nth_flight_from(s, number)
        if flight is None:
            console.say("Invalid flight number")
            continue
        booked.append((source, graph.city_names[stop], flight.data))
        legs.append((s, stop))
        source, s = stop_name, stop

    console.say("")
    console.say("Your Multi-Leg Journey: ")
    for origin, target, data in booked:
        console.say(
            f"From {origin} to {target}, Departure: {data.departure_time}, "
            f"Arrival: {data.arrival_time}, Airline: {data.airline_name}, "
            f"Price: {data.price}, Duration: {data.duration():g} hours"
        )
    return legs


def _show_route(graph: FlightGraph, console: Console, route: Route, unit: str) -> None:
    names = graph.city_names
    console.say(
        f"Shortest path from {names[route.source]} to {names[route.destination]} "
        f"is: {route.cost:g}{unit}"
    )
    console.say("Path: ")
    for flight in route.flights:
        data = flight.data
        console.say(
            f"From {names[flight.origin]} to {names[flight.destination]}: "
            f"Airline: {data.airline_name}, Departure: {data.departure_time}, "
            f"Arrival: {data.arrival_time}, Duration: {data.duration():g} hours"
        )


def _route_trip(graph: FlightGraph, console: Console, search, unit: str) -> list[Leg]:
    source = console.ask("Enter source city to fly from: ")
    destination = console.ask("Enter destination city to fly from: ")
    s, d = _cities(source, destination, message="Invalid source or destination")
    route = search(s, d)
    if route is None:
        console.say(
            f"No path found between {graph.city_names[s]} and {graph.city_names[d]}"
        )
        return []
    _show_route(graph, console, route, unit)
    return route.legs


def cheapest_trip(graph: FlightGraph, console: Console) -> list[Leg]:
    """Show the lowest-price route between two cities; return its legs."""
    return _route_trip(graph, console, graph.cheapest_route, "")


def shortest_trip(graph: FlightGraph, console: Console, city_map: CityMap) -> list[Leg]:
    """Show the shortest route on the map between two cities; return its legs."""
    return _route_trip(
        graph,
        console,
        lambda s, d: graph.shortest_route(s, d, city_map.distance),
        " units",
    )


def _layover_line(graph: FlightGraph, stop: LayoverStop, flight: Flight, total: float) -> str:
    data = flight.data
    return (
        f"From {graph.city_names[stop.city_index]} to {graph.city_names[flight.destination]}"
        f" via airline {data.airline_name} Date {data.date} arrival time: "
        f"{data.arrival_time} departure time: {data.departure_time} price: {data.price}"
        f" layover price per day: {stop.charges} total charges: {total:g}"
    )


def _connect(
    graph: FlightGraph, console: Console, queue: LayoverQueue, arrival: FlightData
) -> Flight | None:
    stop = queue.front()
    onward = queue.next_stop()
    if stop is None or onward is None:
        return None
    options = graph.layover_options(
        stop.city_index, onward.city_index, arrival, stop.staytime
    )
    console.say("Following are the flights available in accordance with your layover time: ")
    if not options:
        return None
    for number, flight in enumerate(options, start=1):
        line = _layover_line(graph, stop, flight, stop.charges + flight.data.price)
        console.say(f"{number}. {line}")
    choice = console.ask_int("Enter the flight you want to select: ")
    if not 1 <= choice <= len(options):
        return None
    flight = options[choice - 1]
    total = stop.charges * stop.staytime / 24 + flight.data.price
    console.say("Flight selected: " + _layover_line(graph, stop, flight, total))
    return flight


def layover_trip(
    graph: FlightGraph, console: Console, hotel_charges: Mapping[int, int] | None = None
) -> list[Leg]:
    """Book a trip with one or two timed layovers; return the legs that connect."""
    source = console.ask("Enter the source city: ")
    first_name = console.ask("Enter the destination city: ")
    s, first = _cities(source, first_name, message="Invalid source or destination")
    _show_trip(graph, console, s, first)
    flight = graph.choose_flight(s, first, console.ask_int("Enter flight you want to select: "))
    if flight is None:
        raise BookingError("Invalid flight number")
    console.say("  " + flight.data.describe())

    stay = _ask_float(console, f"Enter the time of layover (in hours) of {first_name} :")
    second_name = console.ask("Enter the second destination city: ")
    (second,) = _cities(second_name, message="Invalid destination city")
    legs: list[Leg] = [(s, first), (first, second)]

    queue = LayoverQueue(hotel_charges)
    queue.enqueue(first, stay)
    if console.ask_int("Enter 1 to add another layover or 0 to end: ") == 1:
        stay = _ask_float(console, f"Enter the time of layover (in hours) of {second_name} :")
        queue.enqueue(second, stay)
        third_name = console.ask("Enter the third destination city: ")
        (third,) = _cities(third_name, message="Invalid destination city")
        legs.append((second, third))
        queue.enqueue(third, 0)
    else:
        queue.enqueue(second, 0)

    arrival = flight.data
    connected = 1
    while len(queue) > 1:
        chosen = _connect(graph, console, queue, arrival)
        if chosen is None:
            console.say("No Flights are available with your layover timings")
            break
        arrival = chosen.data
        connected += 1
        queue.dequeue()
    return legs[:connected]