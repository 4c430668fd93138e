"""Configuration schemas for the gas pricer."""

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gas_pricer.core.pricer import GasPricer
from gas_pricer.core.targets import constant_target
from gas_pricer.schemas.defaults import (
    DEFAULT_FLOOR_PRICE,
    DEFAULT_INITIAL_PRICE,
    DEFAULT_MAX_CHANGE_FRACTION,
    DEFAULT_REPLAY_NAME,
    DEFAULT_TARGET_RATE,
)


class PricerConfig(BaseModel):
    """Configuration for a GasPricer.

    ``target_rate`` seeds the default constant supplier. A dynamic supplier
    can be passed to ``build_pricer`` instead.
    """

    initial_price: float = Field(
        DEFAULT_INITIAL_PRICE,
        ge=0,
        description="Starting price; 0 means start at the floor",
    )
    floor_price: float = Field(
        DEFAULT_FLOOR_PRICE,
        ge=0,
        description="Minimum price the pricer will ever return",
    )
    target_rate: float = Field(
        DEFAULT_TARGET_RATE,
        gt=0,
        description="Target gas per second",
    )
    max_change_fraction: float = Field(
        DEFAULT_MAX_CHANGE_FRACTION,
        ge=0,
        description="Maximum fractional price move per epoch (0.5 = +/-50%)",
    )

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_initial_above_floor(self) -> "PricerConfig":
        if self.initial_price != 0 and self.initial_price < self.floor_price:
            raise ValueError(
                f"initial_price {self.initial_price} is below "
                f"floor_price {self.floor_price}"
            )
        return self

    def build_pricer(
        self, get_target_rate: Callable[[], float] | None = None
    ) -> GasPricer:
        """Create a GasPricer from this configuration.

        Args:
            get_target_rate: Optional supplier overriding ``target_rate``.

        Returns:
            A fresh pricer.
        """
        if get_target_rate is None:
            get_target_rate = constant_target(self.target_rate)
        return GasPricer(
            initial_price=self.initial_price,
            floor_price=self.floor_price,
            get_target_rate=get_target_rate,
            max_change_fraction=self.max_change_fraction,
        )


class ReplayConfig(BaseModel):
    """A demand series to replay through a pricer.

    When ``target_rates`` is given the target follows that schedule, one
    entry per epoch, repeating the last entry once exhausted.
    """

    name: str = Field(DEFAULT_REPLAY_NAME, description="Replay name")
    description: str = Field("", description="Free-text description")
    pricer: PricerConfig = Field(default_factory=PricerConfig)
    observed_rates: list[float] = Field(
        default_factory=list,
        description="Average gas per second for each epoch",
    )
    target_rates: list[float] | None = Field(
        None,
        min_length=1,
        description="Optional per-epoch target schedule",
    )

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_rates(self) -> "ReplayConfig":
        if any(rate < 0 for rate in self.observed_rates):
            raise ValueError("observed_rates must all be >= 0")
        if self.target_rates is not None and any(r <= 0 for r in self.target_rates):
            raise ValueError("target_rates must all be > 0")
        return self
