# -*- coding: utf-8 -*-
"""
Logging configuration and run defaults.

Library modules only create loggers (`logging.getLogger(__name__)`);
entry points call `setup_logging()` once.
"""

from __future__ import annotations
import logging
from typing import Optional

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# Run log written next to the working directory when requested
DEFAULT_LOG_FILE = "KnapsackLog.txt"

# Default artifacts folder for scripts
DEFAULT_OUT_DIR = "reports"


def setup_logging(log_file: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Configure the root logger: console always, plus an appending file
    handler when `log_file` is given.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    config = dict(LOGGING_CONFIG)
    if level is not None:
        config["level"] = level
    logging.basicConfig(handlers=handlers, force=True, **config)
