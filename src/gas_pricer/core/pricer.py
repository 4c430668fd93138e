"""Epoch-based gas price controller.

The price follows demand: each epoch the caller reports the average gas per
second it observed, the pricer compares it with the target rate, and scales
the price towards the implied ratio. Two guardrails apply:

1. The per-epoch move is clamped to +/- ``max_change_fraction``.
2. The result never drops below ``floor_price`` and is rounded up to a
   whole unit.
"""

import logging
import math
import threading
from numbers import Real
from typing import Any

from gas_pricer.core.errors import (
    InvalidObservedRateError,
    InvalidParameterError,
    InvalidTargetError,
    PriceOverflowError,
)
from gas_pricer.core.targets import TargetRateProvider

logger = logging.getLogger(__name__)


def _is_finite_real(value: Any) -> bool:
    """True for finite int/float values (bools excluded)."""
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class GasPricer:
    """Holds the current gas price and moves it once per epoch.

    ``commit`` (and its shorthand ``update_price``) is the only mutator.
    Commits on one instance are serialized by an internal lock; the epoch
    driver is still expected to commit exactly once per epoch.

    Attributes:
        floor_price: Minimum price the pricer will ever return.
        get_target_rate: Supplier queried for the target on every calculation.
        max_change_fraction: Largest fractional move allowed in one epoch.
    """

    def __init__(
        self,
        initial_price: float,
        floor_price: float,
        get_target_rate: TargetRateProvider,
        max_change_fraction: float,
    ) -> None:
        """Initialize the pricer.

        Args:
            initial_price: Starting price. Zero means "unset" and is replaced
                by ``floor_price``.
            floor_price: Minimum legal price (>= 0).
            get_target_rate: Zero-argument callable returning the target
                gas per second.
            max_change_fraction: Maximum per-epoch change, e.g. 0.5 for +/-50%.

        Raises:
            InvalidParameterError: If any parameter is out of range.
        """
        if not _is_finite_real(floor_price) or floor_price < 0:
            raise InvalidParameterError(
                f"floor_price must be a finite number >= 0, got {floor_price!r}",
                floor_price,
            )
        if not _is_finite_real(initial_price) or initial_price < 0:
            raise InvalidParameterError(
                f"initial_price must be a finite number >= 0, got {initial_price!r}",
                initial_price,
            )
        if not _is_finite_real(max_change_fraction) or max_change_fraction < 0:
            raise InvalidParameterError(
                "max_change_fraction must be a finite number >= 0, "
                f"got {max_change_fraction!r}",
                max_change_fraction,
            )
        if not callable(get_target_rate):
            raise InvalidParameterError(
                "get_target_rate must be callable", get_target_rate
            )

        if initial_price == 0:
            initial_price = floor_price
        elif initial_price < floor_price:
            raise InvalidParameterError(
                f"initial_price {initial_price} is below floor_price {floor_price}",
                initial_price,
            )

        self._current_price: float = float(initial_price)
        self.floor_price: float = float(floor_price)
        self.get_target_rate = get_target_rate
        self.max_change_fraction: float = float(max_change_fraction)
        self._lock = threading.Lock()

    @property
    def current_price(self) -> float:
        """The price in force for the current epoch."""
        return self._current_price

    def _query_target(self) -> float:
        target = self.get_target_rate()
        if not _is_finite_real(target) or target <= 0:
            logger.warning(f"Rejecting target rate {target!r}")
            raise InvalidTargetError(
                f"Target rate must be a finite number > 0, got {target!r}", target
            )
        return float(target)

    def adjustment_factor(self, observed_rate: float, target_rate: float) -> float:
        """Clamp the observed/target ratio to the allowed per-epoch move.

        Args:
            observed_rate: Average gas per second over the last epoch.
            target_rate: Desired gas per second.

        Returns:
            The factor the current price is multiplied by.
        """
        proportion_of_target = observed_rate / target_rate
        if proportion_of_target >= 1:
            return min(proportion_of_target, 1 + self.max_change_fraction)
        return max(proportion_of_target, 1 - self.max_change_fraction)

    def _next_price(self, observed_rate: float) -> tuple[float, float]:
        """Return ``(target_rate, next_price)`` for one epoch."""
        if not _is_finite_real(observed_rate) or observed_rate < 0:
            logger.warning(f"Rejecting observed rate {observed_rate!r}")
            raise InvalidObservedRateError(
                f"Observed rate must be a finite number >= 0, got {observed_rate!r}",
                observed_rate,
            )
        target_rate = self._query_target()
        current_price = self._current_price
        factor = self.adjustment_factor(observed_rate, target_rate)
        candidate = current_price * factor
        if not math.isfinite(candidate):
            logger.warning(f"Price {current_price} x {factor:.4f} overflows")
            raise PriceOverflowError(
                f"Next price overflows: {current_price} x {factor}", candidate
            )
        next_price = float(math.ceil(max(self.floor_price, candidate)))
        logger.debug(
            f"observed={observed_rate} target={target_rate} factor={factor:.4f} "
            f"price {current_price} -> {next_price}"
        )
        return target_rate, next_price

    def calc_next_price(self, observed_rate: float) -> float:
        """Calculate the next gas price from last epoch's average gas per second.

        Does not change the current price.

        Args:
            observed_rate: Average gas per second over the last epoch.

        Returns:
            The next price, whole-valued and never below the floor.

        Raises:
            InvalidObservedRateError: If ``observed_rate`` is negative or non-finite.
            InvalidTargetError: If the supplier returns a non-positive or
                non-finite target.
            PriceOverflowError: If the next price is not a finite number.
        """
        return self._next_price(observed_rate)[1]

    def commit(self, observed_rate: float) -> tuple[float, float, float]:
        """Commit the next gas price and report what the commit used.

        On error the current price is left untouched.

        Args:
            observed_rate: Average gas per second over the last epoch.

        Returns:
            ``(previous_price, target_rate, next_price)`` for this epoch.
        """
        with self._lock:
            previous_price = self._current_price
            target_rate, next_price = self._next_price(observed_rate)
            self._current_price = next_price
        logger.info(f"Gas price updated: {previous_price} -> {next_price}")
        return previous_price, target_rate, next_price

    def update_price(self, observed_rate: float) -> float:
        """Commit the next gas price for this epoch.

        Args:
            observed_rate: Average gas per second over the last epoch.

        Returns:
            The newly committed price.
        """
        return self.commit(observed_rate)[2]

    def __repr__(self) -> str:
        return (
            f"GasPricer(current_price={self._current_price}, "
            f"floor_price={self.floor_price}, "
            f"max_change_fraction={self.max_change_fraction})"
        )
