# taxi_park/analytics/income.py

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.park import TaxiPark

DRIVER_SHARE = 0.2
INCOME_SHARE = 0.8


def driver_incomes(park: TaxiPark) -> dict[Driver, float]:
    """Total trip cost per driver; drivers without trips earn 0.0."""
    incomes = dict.fromkeys(park.all_drivers, 0.0)
    for trip in park.trips:
        incomes[trip.driver] = incomes.get(trip.driver, 0.0) + trip.cost
    return incomes


def check_pareto_principle(
    park: TaxiPark,
    driver_share: float = DRIVER_SHARE,
    income_share: float = INCOME_SHARE,
) -> bool:
    """
    True if the top `driver_share` of drivers by income (20% by default)
    earn at least `income_share` (80%) of the total.

    The driver count is truncated, so a park with fewer than five drivers and
    any income never satisfies the default shares. A park with no income at
    all (including one with no drivers) is reported as False.
    """
    incomes = sorted(driver_incomes(park).values())
    total_income = sum(incomes)
    if total_income == 0:
        return False
    top_count = int(len(park.all_drivers) * driver_share)
    top_income = sum(incomes[len(incomes) - top_count :])
    return top_income / total_income >= income_share
