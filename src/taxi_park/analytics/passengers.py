# taxi_park/analytics/passengers.py
from collections import Counter
from collections.abc import Iterable

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.entities.trip import Trip
from taxi_park.domain.park import TaxiPark


def _trip_counts(trips: Iterable[Trip]) -> Counter[Passenger]:
    # one count per trip, even if a passenger is listed twice on it
    counts: Counter[Passenger] = Counter()
    for trip in trips:
        counts.update(set(trip.passengers))
    return counts


def find_faithful_passengers(park: TaxiPark, min_trips: int) -> set[Passenger]:
    """
    Passengers who completed at least `min_trips` trips.
    min_trips == 0 yields every passenger, including those who never rode.
    """
    if min_trips == 0:
        return set(park.all_passengers)
    counts = _trip_counts(park.trips)
    return {p for p, n in counts.items() if n >= min_trips}


def find_frequent_passengers(park: TaxiPark, driver: Driver) -> set[Passenger]:
    """Passengers taken by `driver` more than once."""
    counts = _trip_counts(t for t in park.trips if t.driver == driver)
    return {p for p, n in counts.items() if n > 1}


def find_smart_passengers(park: TaxiPark) -> set[Passenger]:
    """Passengers who had a discount on the majority of their trips."""
    discounted: list[Trip] = []
    full_price: list[Trip] = []
    for trip in park.trips:
        (discounted if trip.discounted else full_price).append(trip)

    with_discount = _trip_counts(discounted)
    without_discount = _trip_counts(full_price)
    return {
        p
        for p, n in with_discount.items()
        if p not in without_discount or n > without_discount[p]
    }
