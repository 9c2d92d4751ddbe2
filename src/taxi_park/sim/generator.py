# taxi_park/sim/generator.py
from taxi_park.config.models import GeneratorModel
from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.entities.trip import Trip
from taxi_park.domain.park import TaxiPark
from taxi_park.sim.rng import RNGRegistry


def generate_park(cfg: GeneratorModel, rng_registry: RNGRegistry | None = None) -> TaxiPark:
    """
    Build a random park that satisfies every TaxiPark invariant.
    Same config + same registry seed -> same park.
    """
    rng_registry = rng_registry or RNGRegistry(cfg.seed)
    rng = rng_registry.stream("trips")

    drivers = [Driver(f"D-{i}") for i in range(cfg.drivers)]
    passengers = [Passenger(f"P-{i}") for i in range(cfg.passengers)]
    max_riders = min(cfg.max_passengers_per_trip, cfg.passengers)

    trips = []
    for _ in range(cfg.trips):
        driver = drivers[int(rng.integers(cfg.drivers))]
        n_riders = int(rng.integers(1, max_riders + 1))
        riders = tuple(
            passengers[int(i)] for i in rng.choice(cfg.passengers, size=n_riders, replace=False)
        )
        duration = int(rng.integers(0, cfg.max_duration_min + 1))
        cost = round(float(rng.uniform(0.0, cfg.max_cost)), 2)
        discount = None
        if rng.random() < cfg.discount_rate:
            discount = float(rng.choice(cfg.discounts))
        trips.append(Trip(driver, riders, duration, cost, discount))

    return TaxiPark.of(drivers, passengers, trips)
