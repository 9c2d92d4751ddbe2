# taxi_park/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from taxi_park.app.analytics import ParkAnalytics
from taxi_park.app.hooks import NoopHooks
from taxi_park.config.models import AnalyticsModel
from taxi_park.domain.park import TaxiPark
from taxi_park.io.query_logging import QueryLogging
from taxi_park.sim.generator import generate_park
from taxi_park.sim.rng import RNGRegistry


@dataclass
class App:
    config: AnalyticsModel
    park: TaxiPark
    analytics: ParkAnalytics


def build(
    cfg: AnalyticsModel | Mapping, park: TaxiPark | None = None, *, use_logging: bool = True
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, AnalyticsModel) else AnalyticsModel.model_validate(cfg)

    # 1) Park: given by the caller, or generated from the config
    if park is None:
        if model.generator is None:
            raise ValueError("build() needs a park or a 'generator' section in the config")
        rng_registry = RNGRegistry(model.generator.seed, scenario=model.name)
        park = generate_park(model.generator, rng_registry)

    # 2) Hooks
    hooks = (
        QueryLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 3) Queries
    analytics = ParkAnalytics(
        park,
        hooks=hooks,
        period_min=model.durations.period_min,
        driver_share=model.pareto.driver_share,
        income_share=model.pareto.income_share,
    )
    return App(model, park, analytics)
