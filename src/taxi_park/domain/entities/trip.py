# domain/entities/trip.py
from dataclasses import dataclass

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger


@dataclass(frozen=True)
class Trip:
    driver: Driver
    passengers: tuple[Passenger, ...]
    duration: int  # minutes
    cost: float
    discount: float | None = None  # fraction in (0, 1); None means full price

    def __post_init__(self):
        # lists from callers would make the trip unhashable
        if not isinstance(self.passengers, tuple):
            object.__setattr__(self, "passengers", tuple(self.passengers))

    @property
    def discounted(self) -> bool:
        return self.discount is not None
