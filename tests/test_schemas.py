"""Tests for pricer and replay configuration schemas."""

import pytest
from pydantic import ValidationError

from gas_pricer.core.pricer import GasPricer
from gas_pricer.schemas import PricerConfig, ReplayConfig


def test_pricer_config_defaults() -> None:
    config = PricerConfig()
    assert config.initial_price == 0.0
    assert config.floor_price == 1.0
    assert config.target_rate == 10.0
    assert config.max_change_fraction == 0.5


def test_build_pricer_from_config() -> None:
    pricer = PricerConfig(initial_price=100, floor_price=1).build_pricer()
    assert isinstance(pricer, GasPricer)
    assert pricer.current_price == 100
    assert pricer.calc_next_price(12.5) == 125


def test_build_pricer_with_custom_supplier() -> None:
    pricer = PricerConfig(initial_price=100).build_pricer(lambda: 5.0)
    # observed 5 == target 5: no change
    assert pricer.calc_next_price(5) == 100


def test_build_pricer_unset_initial_price() -> None:
    pricer = PricerConfig(floor_price=30).build_pricer()
    assert pricer.current_price == 30


@pytest.mark.parametrize(
    "kwargs",
    [
        {"floor_price": -1},
        {"target_rate": 0},
        {"target_rate": float("inf")},
        {"max_change_fraction": -0.5},
        {"initial_price": float("nan")},
        {"initial_price": 5, "floor_price": 10},
    ],
)
def test_pricer_config_rejects_invalid(kwargs) -> None:
    with pytest.raises(ValidationError):
        PricerConfig(**kwargs)


def test_pricer_config_is_frozen() -> None:
    config = PricerConfig()
    with pytest.raises(ValidationError):
        config.floor_price = 5


def test_replay_config_nested_dict() -> None:
    config = ReplayConfig(
        name="Nested",
        pricer={"initial_price": 50, "floor_price": 10},
        observed_rates=[1, 2, 3],
    )
    assert config.pricer.initial_price == 50
    assert config.target_rates is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"observed_rates": [10, -1]},
        {"target_rates": [10, 0]},
        {"target_rates": []},
    ],
)
def test_replay_config_rejects_invalid_rates(replay_config_factory, kwargs) -> None:
    with pytest.raises(ValidationError):
        replay_config_factory(**kwargs)
