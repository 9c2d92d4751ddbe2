# taxi_park/domain/park.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.entities.trip import Trip


class InvalidTaxiParkError(ValueError):
    """Raised when a TaxiPark breaks one of its data-model invariants."""


@dataclass(frozen=True)
class TaxiPark:
    all_drivers: frozenset[Driver] = field(default_factory=frozenset)
    all_passengers: frozenset[Passenger] = field(default_factory=frozenset)
    trips: tuple[Trip, ...] = ()

    @classmethod
    def of(
        cls,
        drivers: Iterable[Driver],
        passengers: Iterable[Passenger],
        trips: Iterable[Trip] = (),
    ) -> TaxiPark:
        return cls(frozenset(drivers), frozenset(passengers), tuple(trips))


def validate_park(park: TaxiPark) -> TaxiPark:
    """
    Check the data-model invariants and return the park unchanged.
    Raises InvalidTaxiParkError naming the first offending trip.
    """
    for i, trip in enumerate(park.trips):
        if trip.driver not in park.all_drivers:
            raise InvalidTaxiParkError(f"trip {i}: driver {trip.driver} is not in the park")
        for p in trip.passengers:
            if p not in park.all_passengers:
                raise InvalidTaxiParkError(f"trip {i}: passenger {p} is not in the park")
        if trip.duration < 0:
            raise InvalidTaxiParkError(f"trip {i}: duration must be >= 0, got {trip.duration}")
        if trip.cost < 0:
            raise InvalidTaxiParkError(f"trip {i}: cost must be >= 0, got {trip.cost}")
        if trip.discount is not None and not 0 < trip.discount < 1:
            raise InvalidTaxiParkError(
                f"trip {i}: discount must be in (0, 1), got {trip.discount}"
            )
    return park
