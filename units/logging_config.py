"""Centralized logging configuration for units."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .api.config.get_home_dir import get_home_dir


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging for units.

    The file handler always records INFO and above; ``level`` only controls
    what reaches stderr.

    Args:
        level: Logging level for stderr (default WARNING)
        log_file: Optional path to log file (default ~/.units/units.log)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    if log_file is None:
        log_file = get_home_dir("units.log")

    formatter = logging.Formatter(format_string)

    logger = logging.getLogger("units")
    logger.setLevel(min(level, logging.INFO))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
    except OSError as exc:
        logger.warning(f"Cannot open log file {log_file}: {exc}")
        return

    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
