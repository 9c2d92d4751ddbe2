# tests/config/test_models.py
import pytest
from pydantic import ValidationError

from taxi_park.config.models import AnalyticsModel, GeneratorModel, ParetoModel


def test_defaults():
    m = AnalyticsModel.model_validate({"name": "n"})
    assert m.durations.period_min == 10
    assert (m.pareto.driver_share, m.pareto.income_share) == (0.2, 0.8)
    assert m.log.level == "INFO"
    assert m.generator is None


def test_unknown_keys_are_rejected():
    with pytest.raises(ValidationError):
        AnalyticsModel.model_validate({"name": "n", "surprise": 1})


@pytest.mark.parametrize("share", [0.0, -0.1, 1.5])
def test_pareto_shares_must_be_fractions(share):
    with pytest.raises(ValidationError):
        ParetoModel(driver_share=share)


def test_period_must_be_positive():
    with pytest.raises(ValidationError):
        AnalyticsModel.model_validate({"name": "n", "durations": {"period_min": 0}})


def test_discounts_must_be_strict_fractions():
    with pytest.raises(ValidationError):
        GeneratorModel(discounts=[0.1, 1.0])


def test_trips_need_drivers_and_passengers():
    with pytest.raises(ValidationError):
        GeneratorModel(drivers=0, trips=3)
    assert GeneratorModel(drivers=0, passengers=0, trips=0).trips == 0
