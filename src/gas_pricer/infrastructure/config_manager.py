"""Replay config storage.

Replay configs live as JSON files in ``CONFIG_DIR``. Files are parsed and
validated in one pass by pydantic, so malformed JSON, a non-object top level
or a bad encoding all surface as a ValidationError naming the file.
"""

import logging
from pathlib import Path
from typing import List

from ..schemas import ReplayConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.cwd() / "scenarios"


def config_path(filename: str) -> Path:
    """Resolve ``filename`` inside the config directory."""
    return CONFIG_DIR / filename


def list_configs() -> List[str]:
    """List the replay config files, sorted so replays run in a stable order.

    Returns:
        Filenames such as ['congestion.json', 'idle.json'].
    """
    if not CONFIG_DIR.is_dir():
        return []
    return sorted(f.name for f in CONFIG_DIR.glob("*.json") if f.is_file())


def load_config(filename: str) -> ReplayConfig:
    """Read and validate a replay config.

    Args:
        filename: Name of the file (e.g. 'congestion.json').

    Returns:
        Validated ReplayConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValidationError: If the file is not valid JSON, not UTF-8, or does
            not match the schema.
    """
    file_path = config_path(filename)
    if not file_path.is_file():
        raise FileNotFoundError(f"Replay config not found: {file_path}")

    logger.debug(f"Loading replay config {file_path}")
    return ReplayConfig.model_validate_json(file_path.read_bytes())


def save_config(config: ReplayConfig, filename: str) -> Path:
    """Write a replay config as indented JSON.

    Args:
        config: The ReplayConfig object to save.
        filename: Target filename.

    Returns:
        Path of the written file.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    file_path = config_path(filename)
    file_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Saved replay config {config.name!r} to {file_path}")
    return file_path
