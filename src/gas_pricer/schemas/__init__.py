"""Schemas package.

- config.py: Configuration models (PricerConfig, ReplayConfig)
- data.py: Replay data models (PriceUpdate, ReplayMetrics, ReplayRun)
"""

from .config import PricerConfig, ReplayConfig
from .data import PriceUpdate, ReplayMetrics, ReplayRun

__all__ = [
    "PricerConfig",
    "ReplayConfig",
    "PriceUpdate",
    "ReplayMetrics",
    "ReplayRun",
]
