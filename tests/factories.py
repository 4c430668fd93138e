"""Test data factories for generating valid schema objects."""

from typing import Any

from gas_pricer.schemas import PricerConfig, PriceUpdate, ReplayConfig


def create_pricer_config(**kwargs: Any) -> PricerConfig:
    """Create a PricerConfig matching the reference scenarios, with overrides."""
    defaults = {
        "initial_price": 100.0,
        "floor_price": 1.0,
        "target_rate": 10.0,
        "max_change_fraction": 0.5,
    }
    return PricerConfig(**{**defaults, **kwargs})


def create_replay_config(name: str = "Test Replay", **kwargs: Any) -> ReplayConfig:
    """Create a valid ReplayConfig."""
    defaults = {
        "pricer": create_pricer_config(),
        "observed_rates": [10.0, 12.5, 7.5],
    }
    data = {**defaults, **kwargs}
    return ReplayConfig(name=name, **data)


def create_price_update(
    epoch: int = 1,
    previous_price: float = 100.0,
    next_price: float = 100.0,
    **kwargs: Any,
) -> PriceUpdate:
    """Create a valid PriceUpdate."""
    defaults = {
        "observed_rate": 10.0,
        "target_rate": 10.0,
        "adjustment_factor": next_price / previous_price if previous_price else 1.0,
        "at_floor": False,
    }
    data = {**defaults, **kwargs}
    return PriceUpdate(
        epoch=epoch, previous_price=previous_price, next_price=next_price, **data
    )
