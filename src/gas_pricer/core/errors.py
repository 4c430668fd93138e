"""Exceptions raised by the gas pricer.

All errors derive from GasPricerError, which is a ValueError so callers
that already guard numeric input with ``except ValueError`` keep working.
"""

from typing import Any


class GasPricerError(ValueError):
    """Base class for every pricing error.

    Attributes:
        value: The offending input.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidParameterError(GasPricerError):
    """A construction parameter is out of range or of the wrong type."""


class InvalidTargetError(GasPricerError):
    """The target-rate supplier returned an unusable value."""


class InvalidObservedRateError(GasPricerError):
    """The observed rate for an epoch is negative, non-finite or not a number."""


class PriceOverflowError(GasPricerError):
    """The next price is too large to represent as a finite number."""
