"""Logging configuration."""

import logging
import sys
from pathlib import Path

from ..config.settings import LoggingConfig


def setup_logging(config: LoggingConfig, log_dir: Path) -> Path:
    """
    Set up logging configuration.

    Args:
        config: Logging configuration.
        log_dir: Directory for log files.

    Returns:
        Path of the log file.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / Path(config.file).name
    level = getattr(logging, config.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if config.console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.info(f"Logging configured: level={config.level}, file={log_file}")
    return log_file
