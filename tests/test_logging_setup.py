from __future__ import annotations

import logging

import pytest

from schoolboard.config import LoggingConfig
from schoolboard.logging_setup import configure_logging


def test_configure_logging_writes_file(tmp_path) -> None:
    log_path = configure_logging(LoggingConfig(level="info", log_dir=str(tmp_path / "logs")))

    logging.getLogger("schoolboard.test").info("board ready")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path.exists()
    assert "board ready" in log_path.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_rejects_unknown_level(tmp_path) -> None:
    with pytest.raises(ValueError):
        configure_logging(LoggingConfig(level="chatty", log_dir=str(tmp_path)))
