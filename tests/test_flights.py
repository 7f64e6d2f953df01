import pytest

from skynav.cities import CITIES, UnknownCityError, city_index
from skynav.geometry import CityMap
from skynav.flights import (
    FlightData,
    FlightGraph,
    build_graph,
    day_of,
    load_flights,
    time_to_minutes,
)


def fd(dep="10:00", arr="12:00", price=100, airline="PIA", date="05/06/2024"):
    return FlightData(dep, arr, price, airline, date)


@pytest.fixture
def graph():
    g = FlightGraph(5)
    g.add_flight(0, 1, fd(price=100, airline="A"))
    g.add_flight(1, 2, fd(price=100, airline="B"))
    g.add_flight(0, 2, fd(price=500, airline="C"))
    g.add_flight(2, 3, fd(price=50, airline="D"))
    return g


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("01:30") == 90


def test_time_to_minutes_rejects_garbage():
    with pytest.raises(ValueError):
        time_to_minutes("ab:cd")


def test_day_of():
    assert day_of("05/12/2024") == 5
    assert day_of("31/01/2025") == 31


def test_duration_same_time_is_zero():
    assert fd(dep="08:15", arr="08:15").duration() == 0


def test_duration_wraps_to_next_day():
    there = fd(dep="22:00", arr="02:00").duration()
    back = fd(dep="02:00", arr="22:00").duration()
    assert there + back == 24
    assert there < back


def test_describe_contains_fields():
    text = fd(dep="09:00", arr="11:30", price=321, airline="Emirates", date="07/07/2024").describe()
    assert text.startswith("Date 07/07/2024, Departure: 09:00, Arrival: 11:30")
    assert "Price: 321" in text
    assert "Airline: Emirates" in text
    assert text.endswith("Duration: 2.5 hours")


def test_flights_from_newest_first():
    g = FlightGraph(3)
    g.add_flight(0, 1, fd(airline="first"))
    g.add_flight(0, 2, fd(airline="second"))
    assert [f.data.airline_name for f in g.flights_from(0)] == ["second", "first"]


def test_flights_between_and_count(graph):
    graph.add_flight(0, 1, fd(airline="E"))
    between = graph.flights_between(0, 1)
    assert [f.data.airline_name for f in between] == ["E", "A"]
    assert graph.count_flights(0, 1) == len(between)
    assert graph.count_flights(3, 0) == 0


def test_choose_flight(graph):
    graph.add_flight(0, 1, fd(airline="E"))
    assert graph.choose_flight(0, 1, 1).data.airline_name == "E"
    assert graph.choose_flight(0, 1, 2).data.airline_name == "A"
    assert graph.choose_flight(0, 1, 3) is None


def test_nth_flight_from_ignores_destination(graph):
    flights = graph.flights_from(0)
    assert graph.nth_flight_from(0, 1) is flights[0]
    assert graph.nth_flight_from(0, 0) is flights[0]
    assert graph.nth_flight_from(0, 2) is flights[1]
    assert graph.nth_flight_from(0, 3) is None
    assert graph.nth_flight_from(4, 1) is None


def test_first_flight(graph):
    assert graph.first_flight(0, 2).data.airline_name == "C"
    assert graph.first_flight(3, 0) is None


def test_cheapest_route(graph):
    route = graph.cheapest_route(0, 3)
    assert route.legs == [(0, 1), (1, 2), (2, 3)]
    assert route.cost == sum(f.data.price for f in route.flights)
    assert [(f.origin, f.destination) for f in route.flights] == route.legs


def test_cheapest_route_unreachable(graph):
    assert graph.cheapest_route(3, 0) is None
    assert graph.cheapest_route(0, 4) is None


def test_cheapest_route_to_self(graph):
    route = graph.cheapest_route(2, 2)
    assert route.cost == 0
    assert route.legs == []


def test_shortest_route_uses_distance(graph):
    city_map = CityMap()
    route = graph.shortest_route(0, 3, city_map.distance)
    assert route.legs[0][0] == 0 and route.legs[-1][1] == 3
    assert route.cost == sum(city_map.distance(a, b) for a, b in route.legs)
    direct = graph.shortest_route(0, 2, lambda i, j: 1)
    assert direct.legs == [(0, 2)]
    assert direct.cost == 1


def test_layover_options():
    g = FlightGraph(3)
    arrival = fd(dep="06:00", arr="10:00", date="05/06/2024")
    too_soon = g.add_flight(1, 2, fd(dep="11:00", arr="13:00", date="05/06/2024"))
    fine = g.add_flight(1, 2, fd(dep="13:00", arr="15:00", date="05/06/2024"))
    earlier_day = g.add_flight(1, 2, fd(dep="14:00", arr="16:00", date="04/06/2024"))
    other = g.add_flight(1, 0, fd(dep="15:00", arr="17:00", date="05/06/2024"))
    options = g.layover_options(1, 2, arrival, 2)
    assert fine in options
    assert too_soon not in options
    assert earlier_day not in options
    assert other not in options


def test_connecting_cities(graph):
    assert graph.connecting_cities(0, 2) == [1]
    assert graph.connecting_cities(0, 3) == [2]
    assert graph.connecting_cities(3, 0) == []


def test_invalid_index_raises(graph):
    with pytest.raises(UnknownCityError):
        graph.add_flight(0, 9, fd())
    with pytest.raises(UnknownCityError):
        graph.flights_from(-1)
    with pytest.raises(UnknownCityError):
        graph.cheapest_route(0, 5)


def test_load_flights(tmp_path):
    path = tmp_path / "Flights.txt"
    path.write_text(
        "Islamabad Paris 01/12/2024 09:00 15:00 120000 PIA\n"
        "Atlantis Paris 01/12/2024 09:00 15:00 90 Nowhere\n"
        "Paris Tokyo 02/12/2024 10:00 06:00 150000 AirFrance\n"
        "Paris Tokyo\n"
    )
    g = FlightGraph(len(CITIES))
    assert load_flights(g, path) == 2
    paris = city_index("Paris")
    flight = g.first_flight(city_index("Islamabad"), paris)
    assert flight.data == FlightData("09:00", "15:00", 120000, "PIA", "01/12/2024")
    assert g.count_flights(paris, city_index("Tokyo")) == 1


def test_load_flights_bad_price(tmp_path):
    path = tmp_path / "Flights.txt"
    path.write_text("Islamabad Paris 01/12/2024 09:00 15:00 cheap PIA\n")
    with pytest.raises(ValueError):
        load_flights(FlightGraph(len(CITIES)), path)


def test_build_graph(tmp_path):
    path = tmp_path / "Flights.txt"
    path.write_text("London Berlin 03/12/2024 08:00 10:00 400 Lufthansa\n")
    g = build_graph(path)
    assert g.city_names[: len(CITIES)] == list(CITIES)
    route = g.cheapest_route(city_index("London"), city_index("Berlin"))
    assert route.cost == 400
    assert route.flights[0].data.airline_name == "Lufthansa"