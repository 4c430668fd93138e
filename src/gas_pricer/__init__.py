"""Epoch-based gas price controller."""

from gas_pricer.core.errors import (
    GasPricerError,
    InvalidObservedRateError,
    InvalidParameterError,
    InvalidTargetError,
    PriceOverflowError,
)
from gas_pricer.core.pricer import GasPricer
from gas_pricer.core.targets import ScheduledTarget, TargetRateProvider, constant_target

__all__ = [
    "GasPricer",
    "TargetRateProvider",
    "ScheduledTarget",
    "constant_target",
    "GasPricerError",
    "InvalidParameterError",
    "InvalidTargetError",
    "InvalidObservedRateError",
    "PriceOverflowError",
]
