"""Centralized metrics calculation for replay data.

Pure functions over PriceUpdate lists, shared by the replay service, the
CLI summary and the tests.
"""

from typing import List

from gas_pricer.schemas.data import PriceUpdate, ReplayMetrics


def max_step_change(updates: List[PriceUpdate]) -> float:
    """Largest absolute fractional price move across all epochs."""
    if not updates:
        return 0.0
    return max(abs(u.adjustment_factor - 1.0) for u in updates)


def floor_hit_rate(updates: List[PriceUpdate]) -> float:
    """Fraction of epochs that ended at the floor (0.0 to 1.0)."""
    if not updates:
        return 0.0
    return sum(1 for u in updates if u.at_floor) / len(updates)


def summarize(updates: List[PriceUpdate]) -> ReplayMetrics:
    """Calculate aggregate metrics for a replay.

    Args:
        updates: Committed epochs, in order.

    Returns:
        ReplayMetrics object. ``final_price`` is 0.0 for an empty replay.
    """
    return ReplayMetrics(
        epochs=len(updates),
        final_price=updates[-1].next_price if updates else 0.0,
        max_step_change=max_step_change(updates),
        floor_hit_rate=floor_hit_rate(updates),
    )
