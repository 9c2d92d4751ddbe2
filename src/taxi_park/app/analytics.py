# taxi_park/app/analytics.py
import time

from taxi_park.analytics.drivers import find_fake_drivers
from taxi_park.analytics.durations import PERIOD_MIN, find_most_frequent_trip_duration_period
from taxi_park.analytics.income import DRIVER_SHARE, INCOME_SHARE, check_pareto_principle
from taxi_park.analytics.passengers import (
    find_faithful_passengers,
    find_frequent_passengers,
    find_smart_passengers,
)
from taxi_park.app.hooks import NoopHooks, QueryHooks
from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.park import TaxiPark, validate_park


class ParkAnalytics:
    """
    The six park queries bound to one park and one set of query parameters.
    Every call is reported through the hooks; the park is validated once, up front.
    """

    def __init__(
        self,
        park: TaxiPark,
        *,
        hooks: QueryHooks | None = None,
        period_min: int = PERIOD_MIN,
        driver_share: float = DRIVER_SHARE,
        income_share: float = INCOME_SHARE,
    ):
        self.park = validate_park(park)
        self.hooks = hooks or NoopHooks()
        self.period_min = period_min
        self.driver_share = driver_share
        self.income_share = income_share

    def _run(self, name: str, fn, *args, **params):
        self.hooks.query_start(name, **params)
        t0 = time.perf_counter()
        try:
            result = fn(self.park, *args, **params)
        except Exception as exc:
            self.hooks.error(name, exc=exc, **params)
            raise
        self.hooks.query_end(
            name, result=result, wall_ms=(time.perf_counter() - t0) * 1000, **params
        )
        return result

    def fake_drivers(self) -> set[Driver]:
        return self._run("fake_drivers", find_fake_drivers)

    def faithful_passengers(self, min_trips: int) -> set[Passenger]:
        return self._run("faithful_passengers", find_faithful_passengers, min_trips=min_trips)

    def frequent_passengers(self, driver: Driver) -> set[Passenger]:
        return self._run("frequent_passengers", find_frequent_passengers, driver=driver)

    def smart_passengers(self) -> set[Passenger]:
        return self._run("smart_passengers", find_smart_passengers)

    def most_frequent_trip_duration_period(self) -> range | None:
        return self._run(
            "most_frequent_trip_duration_period",
            find_most_frequent_trip_duration_period,
            period=self.period_min,
        )

    def pareto_principle(self) -> bool:
        return self._run(
            "pareto_principle",
            check_pareto_principle,
            driver_share=self.driver_share,
            income_share=self.income_share,
        )
