"""Logging setup utilities for neuralcore."""

from __future__ import annotations

import logging
import sys

from neuralcore.config.settings import LoggingConfig

CONSOLE_HANDLER = "neuralcore.console"
FILE_HANDLER = "neuralcore.file"
HANDLER_NAMES = (CONSOLE_HANDLER, FILE_HANDLER)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the neuralcore application.

    Sets up the 'neuralcore' logger with the specified level, format, and
    optional file handler. Calling it again replaces the handlers installed
    by the previous call.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("neuralcore")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in [h for h in root_logger.handlers if h.name in HANDLER_NAMES]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.set_name(CONSOLE_HANDLER)
    root_logger.addHandler(console_handler)

    if config.file:
        file_handler = logging.FileHandler(config.file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.set_name(FILE_HANDLER)
        root_logger.addHandler(file_handler)

    root_logger.info("Logging initialized at %s level", config.level)
