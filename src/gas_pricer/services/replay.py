"""Replay a demand series through a GasPricer.

Used offline to see how a pricer configuration responds to a sequence of
observed rates. Each observed rate is committed as one epoch.
"""

import logging
import math
from typing import Iterable, List

import pandas as pd

from gas_pricer.core.pricer import GasPricer
from gas_pricer.core.targets import ScheduledTarget
from gas_pricer.schemas import PriceUpdate, ReplayConfig, ReplayRun
from gas_pricer.schemas.columns import ColumnNames
from gas_pricer.services.metrics import summarize

logger = logging.getLogger(__name__)


def replay(pricer: GasPricer, observed_rates: Iterable[float]) -> List[PriceUpdate]:
    """Commit one epoch per observed rate and record each step.

    Args:
        pricer: The pricer to drive. Its price is mutated.
        observed_rates: Average gas per second for each epoch.

    Returns:
        One PriceUpdate per epoch.
    """
    floor = math.ceil(pricer.floor_price)
    updates: list[PriceUpdate] = []
    for epoch, observed_rate in enumerate(observed_rates, start=1):
        previous_price, target_rate, next_price = pricer.commit(observed_rate)
        updates.append(
            PriceUpdate(
                epoch=epoch,
                observed_rate=observed_rate,
                target_rate=target_rate,
                previous_price=previous_price,
                next_price=next_price,
                adjustment_factor=(
                    next_price / previous_price if previous_price else 1.0
                ),
                at_floor=next_price == floor,
            )
        )

    logger.info(f"Replayed {len(updates)} epochs, final price {pricer.current_price}")
    return updates


def replay_config(config: ReplayConfig) -> ReplayRun:
    """Build a pricer from ``config`` and replay its demand series.

    Args:
        config: Validated replay configuration.

    Returns:
        ReplayRun holding the config, every update and aggregate metrics.
    """
    logger.info(f"Running replay: {config.name}")
    get_target_rate = (
        ScheduledTarget(config.target_rates) if config.target_rates else None
    )
    pricer = config.pricer.build_pricer(get_target_rate)
    updates = replay(pricer, config.observed_rates)
    return ReplayRun(config=config, updates=updates, metrics=summarize(updates))


def updates_to_dataframe(updates: List[PriceUpdate]) -> pd.DataFrame:
    """Convert price updates into a DataFrame, one row per epoch."""
    if not updates:
        return pd.DataFrame(columns=ColumnNames.ALL)
    return pd.DataFrame([u.model_dump() for u in updates], columns=ColumnNames.ALL)
