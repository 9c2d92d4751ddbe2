# taxi_park/analytics/drivers.py

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.park import TaxiPark


def find_fake_drivers(park: TaxiPark) -> set[Driver]:
    """Drivers registered in the park who performed no trips."""
    return set(park.all_drivers) - {t.driver for t in park.trips}
