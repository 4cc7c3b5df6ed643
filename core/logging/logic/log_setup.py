"""
core/logging/logic/log_setup.py
===============================

Root logger configuration, called once from bootstrap.

• File handler: everything at the configured level, rotating
  (<settings dir>/logs/linguaops.log)
• Console handler: WARNING and above only
"""
from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from core.config.config_service import ConfigService

LOG_FILE_NAME = "linguaops.log"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(config: ConfigService) -> Path | None:
    """
    Attach file + console handlers to the root logger.

    Returns the log file path, or None if the log directory is not
    writable (console logging still works in that case).
    """
    level = _LEVELS.get(config.logging.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir = config.paths.log_dir_path
    log_file = log_dir / LOG_FILE_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=config.logging.max_bytes,
            backupCount=config.logging.backup_count,
            encoding="utf-8",
        )
    except OSError as exc:
        root_logger.warning("File logging disabled (%s): %s", log_dir, exc)
        return None

    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    return log_file
