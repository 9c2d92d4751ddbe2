from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- QUERIES ---------------------


class DurationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    period_min: int = Field(default=10, gt=0)  # width of a duration bin


class ParetoModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    driver_share: float = 0.2  # top fraction of drivers
    income_share: float = 0.8  # fraction of total income they must reach

    @field_validator("driver_share", "income_share")
    def _unit_interval(cls, v: float, info: ValidationInfo) -> float:
        if not 0 < v <= 1:
            raise ValueError(f"{info.field_name} must be in (0, 1]")
        return v


# ----------------- SYNTHETIC PARKS ---------------------


class GeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    seed: int = 123
    drivers: int = Field(default=10, ge=0)
    passengers: int = Field(default=20, ge=0)
    trips: int = Field(default=50, ge=0)
    max_passengers_per_trip: int = Field(default=4, ge=1)
    max_duration_min: int = Field(default=60, ge=0)
    max_cost: float = Field(default=50.0, ge=0)
    discount_rate: float = Field(default=0.3, ge=0, le=1)  # chance a trip is discounted
    discounts: list[float] = Field(default_factory=lambda: [0.05, 0.1, 0.2, 0.3, 0.4])

    @field_validator("discounts")
    @classmethod
    def _check_discounts(cls, v: list[float]) -> list[float]:
        if any(not 0 < d < 1 for d in v):
            raise ValueError("discounts must lie strictly between 0 and 1")
        return v

    @model_validator(mode="after")
    def _check_population(self):
        # every trip needs one driver and at least one passenger
        if self.trips and (self.drivers == 0 or self.passengers == 0):
            raise ValueError("trips need at least one driver and one passenger")
        if self.trips and self.discount_rate > 0 and not self.discounts:
            raise ValueError("discount_rate > 0 requires at least one discount value")
        return self


# ------------------------------------------------------------------


class AnalyticsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    durations: DurationModel = DurationModel()
    pareto: ParetoModel = ParetoModel()
    generator: GeneratorModel | None = None
