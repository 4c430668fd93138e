"""Command-line replay of the configs in ``scenarios/``."""

import logging
import sys

from pydantic import ValidationError

from gas_pricer.core.errors import GasPricerError
from gas_pricer.infrastructure import config_manager
from gas_pricer.schemas import ReplayRun
from gas_pricer.services.replay import replay_config

logger = logging.getLogger("gas_pricer")


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the package logger."""
    logger.setLevel(level)
    if logger.handlers:
        logger.handlers.clear()
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    logger.addHandler(stream_handler)


def print_run(run: ReplayRun) -> None:
    """Print a short summary of a replay."""
    m = run.metrics
    print(f"--- {run.config.name}: {run.config.description} ---")
    print(f"  Epochs:          {m.epochs}")
    print(f"  Final Price:     {m.final_price:.0f}")
    print(f"  Max Step Change: {m.max_step_change:.2%}")
    print(f"  Floor Hit Rate:  {m.floor_hit_rate:.2%}")
    print()


def main() -> int:
    """Replay every config file and print a summary of each.

    Returns:
        Exit code: 0 if every config replayed, 1 otherwise.
    """
    configure_logging()
    filenames = config_manager.list_configs()
    if not filenames:
        print(f"No replay configs found in {config_manager.CONFIG_DIR}.")
        return 0

    failures = 0
    for filename in filenames:
        try:
            config = config_manager.load_config(filename)
            run = replay_config(config)
        except (ValidationError, GasPricerError) as e:
            logger.error(f"Error replaying {filename}: {e}")
            failures += 1
            continue
        print_run(run)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
