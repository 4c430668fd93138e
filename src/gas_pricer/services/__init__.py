"""Services package for offline analysis.

This package contains:
- replay.py: drive a GasPricer through a demand series
- metrics.py: aggregate metrics over replayed epochs
"""

from gas_pricer.services.metrics import summarize
from gas_pricer.services.replay import replay, replay_config, updates_to_dataframe

__all__ = ["replay", "replay_config", "updates_to_dataframe", "summarize"]
