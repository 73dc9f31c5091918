"""Logging setup from the ``logging`` config section."""

from __future__ import annotations

import logging
from pathlib import Path

from schoolboard.config import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_FILE_NAME = "schoolboard.log"


def configure_logging(config: LoggingConfig) -> Path:
    """Send log records to the console and to a file under ``log_dir``."""
    level = logging.getLevelName(str(config.level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(), logging.FileHandler(log_path, encoding="utf-8")],
        force=True,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log_path


__all__ = ["configure_logging"]
