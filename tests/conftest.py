"""Shared test fixtures."""

from typing import Callable

import pytest

from gas_pricer.core.pricer import GasPricer
from gas_pricer.core.targets import constant_target

from .factories import create_price_update, create_replay_config


@pytest.fixture
def pricer_factory() -> Callable[..., GasPricer]:
    """Build pricers around the reference scenario (price 100, target 10, +/-50%)."""

    def make(
        initial_price: float = 100.0,
        floor_price: float = 1.0,
        target_rate: float = 10.0,
        max_change_fraction: float = 0.5,
        get_target_rate: Callable[[], float] | None = None,
    ) -> GasPricer:
        return GasPricer(
            initial_price=initial_price,
            floor_price=floor_price,
            get_target_rate=get_target_rate or constant_target(target_rate),
            max_change_fraction=max_change_fraction,
        )

    return make


@pytest.fixture
def pricer(pricer_factory: Callable[..., GasPricer]) -> GasPricer:
    """Return a pricer far from its floor."""
    return pricer_factory()


@pytest.fixture
def price_update_factory():
    """Fixture that returns the price update factory function."""
    return create_price_update


@pytest.fixture
def replay_config_factory():
    """Fixture that returns the replay config factory function."""
    return create_replay_config
