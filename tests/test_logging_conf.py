from __future__ import annotations

import json
import logging
from pathlib import Path

from gem_lookup.logging_conf import LOG_FILENAME, LOGGER_NAME, component_logger, configure_logging


def test_configure_logging_writes_json_lines(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    configure_logging(log_dir=log_dir, force=True)

    component_logger("scheduler").warning("batch_dispatched", batch_index=1)
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    lines = (log_dir / LOG_FILENAME).read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["event"] == "batch_dispatched"
    assert record["batch_index"] == 1
    assert record["component"] == "scheduler"
    assert record["levelname"] == "WARNING"


def test_verbose_lowers_console_threshold(tmp_path: Path) -> None:
    configure_logging(verbose=True, log_dir=tmp_path, force=True)
    logger = logging.getLogger(LOGGER_NAME)
    console = next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))
    assert console.level == logging.DEBUG
    assert logger.level == logging.DEBUG

    configure_logging(log_dir=tmp_path, force=True)
    console = next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))
    assert console.level == logging.WARNING
