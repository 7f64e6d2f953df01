# skynav

skynav is a console flight planner for a fixed network of eleven cities:
Islamabad, Newyork, Paris, Tokyo, London, Amsterdam, Singapore, Sydney,
Berlin, Seoul and HongKong.

It reads a timetable of flights and offers a menu that lets you:

1. book a direct flight,
2. book an indirect flight through one connecting city,
3. find the lowest-price route between two cities,
4. search for flights on one airline through a chosen stop,
5. book a trip with one or two timed layovers, with hotel charges per day
   at each stop,
6. build a multi-leg trip one stop at a time (type `end` to finish),
7. find the shortest route by straight-line distance on the map,
8. quit.

After each choice the legs of the trip are printed as lines from one city's
map position to another's; for a layover trip each stop is also printed
with the position and size of its marker.

## Installing

```
pip install .
```

## Data files

The planner reads two whitespace-separated text files.

The flight file holds seven fields per flight:

```
Islamabad Paris 01/12/2024 08:00 14:30 1200 PIA
```

The fields are origin, destination, date (`DD/MM/YYYY`), departure time
(`HH:MM`), arrival time (`HH:MM`), price (a whole number) and airline.
Flights naming an unknown city are skipped. Flights from a city are listed
newest first, that is, in the reverse of their order in the file.

The hotel file holds a city and its hotel price per day:

```
Paris 150
```

Unknown cities are skipped; a later entry for a city replaces an earlier one.

## Running

```
skynav
skynav --flights Flights.txt --hotels HotelCharges_perday.txt
```

`--flights` defaults to `Flights.txt` and `--hotels` to
`HotelCharges_perday.txt`, both in the current directory. If the flight file
cannot be opened the command prints `Error in opening file.` and exits with
status 1; if the hotel file cannot be opened it prints the same message and
carries on with no hotel charges.

Type the number of an option and answer the prompts. City names must be
spelt exactly as listed above. When booking a direct, indirect or multi-leg
flight, the flight number picks the n-th flight leaving the departure city
in listing order. The menu ends on option 8 or at the end of input.

## Using the library

```python
from skynav.flights import build_graph
from skynav.geometry import CityMap

graph = build_graph("Flights.txt")
route = graph.cheapest_route(0, 3)      # Islamabad to Tokyo, or None
if route is not None:
    print(route.cost, route.legs)

city_map = CityMap()
route = graph.shortest_route(0, 3, city_map.distance)
```

- `skynav.flights`: `FlightData`, `Flight`, `Route`, `FlightGraph`
  (`add_flight`, `flights_from`, `flights_between`, `count_flights`,
  `choose_flight`, `nth_flight_from`, `first_flight`, `cheapest_route`,
  `shortest_route`, `layover_options`, `connecting_cities`), `load_flights`,
  `build_graph`, `time_to_minutes` and `day_of`.
- `skynav.cities`: `city_index`, `city_name`, `find_city` and
  `UnknownCityError`.
- `skynav.geometry`: `CityMap` with `position`, `distance` (truncated to
  whole units), `arrow` and `dash`, and the `Arrow` record.
- `skynav.layover`: `LayoverQueue`, `LayoverStop` and `load_hotel_charges`.
- `skynav.minheap`: the `MinHeap` priority queue of `NodeCost` entries used
  by the route searches.
- `skynav.booking`: the interactive flows (`book_direct_flight`,
  `book_indirect_flight`, `custom_flight_search`, `multi_leg_trip`,
  `cheapest_trip`, `shortest_trip`, `layover_trip`) over a `Console`; a flow
  that cannot go ahead raises `BookingError`.
- `skynav.cli`: `run_menu`, `render_legs` and `main`.

## What it does not do

There is no graphical map window, picture, sound or splash screen: the map
exists only as city coordinates, and trips are shown as printed lines.
Bookings are not saved anywhere; they last only for the current run.

## Tests

```
pip install .[test]
pytest
```