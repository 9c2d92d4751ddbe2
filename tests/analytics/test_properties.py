# tests/analytics/test_properties.py
import pytest

from taxi_park.analytics.drivers import find_fake_drivers
from taxi_park.analytics.durations import find_most_frequent_trip_duration_period
from taxi_park.analytics.income import check_pareto_principle
from taxi_park.analytics.passengers import (
    find_faithful_passengers,
    find_frequent_passengers,
    find_smart_passengers,
)
from taxi_park.config.models import GeneratorModel
from taxi_park.domain.park import TaxiPark
from taxi_park.sim.generator import generate_park

SEEDS = [1, 7, 42, 2025]


def _random_park(seed: int, **overrides) -> TaxiPark:
    params = {"seed": seed, "drivers": 8, "passengers": 15, "trips": 40, **overrides}
    return generate_park(GeneratorModel(**params))


@pytest.mark.parametrize("seed", SEEDS)
def test_fake_drivers_are_registered_and_never_drive(seed):
    park = _random_park(seed, drivers=20)
    fake = find_fake_drivers(park)
    assert fake <= park.all_drivers
    assert fake.isdisjoint({t.driver for t in park.trips})


@pytest.mark.parametrize("seed", SEEDS)
def test_faithful_passengers_shrink_as_threshold_grows(seed):
    park = _random_park(seed)
    assert find_faithful_passengers(park, 0) == park.all_passengers
    previous = find_faithful_passengers(park, 1)
    for n in range(2, 15):
        current = find_faithful_passengers(park, n)
        assert current <= previous
        previous = current


@pytest.mark.parametrize("seed", SEEDS)
def test_frequent_passengers_need_two_trips_with_the_driver(seed):
    park = _random_park(seed, drivers=30, trips=35)
    for driver in park.all_drivers:
        if len([t for t in park.trips if t.driver == driver]) < 2:
            assert find_frequent_passengers(park, driver) == set()


@pytest.mark.parametrize("seed", SEEDS)
def test_smart_passengers_had_a_discount(seed):
    park = _random_park(seed)
    discounted = {p for t in park.trips if t.discount is not None for p in t.passengers}
    assert find_smart_passengers(park) <= discounted


def test_no_discounts_means_no_smart_passengers():
    park = _random_park(3, discount_rate=0.0)
    assert find_smart_passengers(park) == set()


@pytest.mark.parametrize("seed", SEEDS)
def test_duration_period_shape_and_count(seed):
    park = _random_park(seed)
    period = find_most_frequent_trip_duration_period(park)
    assert len(period) == 10 and period.start % 10 == 0

    def count(r):
        return sum(1 for t in park.trips if t.duration in r)

    best = max(count(range(s, s + 10)) for s in range(0, 70, 10))
    assert count(period) == best


def test_duration_period_absent_only_without_trips():
    assert find_most_frequent_trip_duration_period(_random_park(5, trips=0)) is None
    assert find_most_frequent_trip_duration_period(_random_park(5, trips=1)) is not None


@pytest.mark.parametrize("seed", SEEDS)
def test_pareto_ignores_trip_order(seed):
    park = _random_park(seed, drivers=10)
    shuffled = TaxiPark(park.all_drivers, park.all_passengers, tuple(sorted(park.trips, key=hash)))
    assert check_pareto_principle(park) == check_pareto_principle(shuffled)
