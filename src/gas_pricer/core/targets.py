"""Target-rate suppliers.

The pricer never stores a target rate. It asks a supplier for one on every
calculation, so the target can be constant, follow a schedule, or be derived
from live configuration elsewhere in the owning service.
"""

from typing import Callable, Iterable, Protocol

from gas_pricer.core.errors import InvalidParameterError, InvalidTargetError


class TargetRateProvider(Protocol):
    """Protocol for a target-rate supplier."""

    def __call__(self) -> float:
        """Return the desired gas per second for the current epoch."""
        ...


def constant_target(rate: float) -> Callable[[], float]:
    """Build a supplier that always returns ``rate``.

    Args:
        rate: Target gas per second.

    Returns:
        A zero-argument callable.
    """

    def get_target_rate() -> float:
        return rate

    return get_target_rate


class ScheduledTarget:
    """A supplier that walks through a fixed sequence of targets.

    Each call consumes one entry. Once the schedule runs out the last target
    is repeated, unless ``repeat_last`` is False, in which case further calls
    raise InvalidTargetError.

    Attributes:
        rates: The schedule.
        calls: Number of times the supplier has been queried.
    """

    def __init__(self, rates: Iterable[float], repeat_last: bool = True) -> None:
        """Initialize the schedule.

        Args:
            rates: Target rate for each successive query.
            repeat_last: Whether to keep returning the final rate when exhausted.

        Raises:
            InvalidParameterError: If ``rates`` is empty.
        """
        self.rates: list[float] = list(rates)
        if not self.rates:
            raise InvalidParameterError("Target schedule must not be empty", self.rates)
        self.repeat_last = repeat_last
        self.calls: int = 0

    def __call__(self) -> float:
        if self.calls >= len(self.rates):
            if not self.repeat_last:
                raise InvalidTargetError(
                    f"Target schedule exhausted after {len(self.rates)} epochs",
                    self.calls,
                )
            rate = self.rates[-1]
        else:
            rate = self.rates[self.calls]
        self.calls += 1
        return rate
