"""Logging configuration for the authoring toolkit.

Command output is written to stdout, so log records go to stderr and,
when a log file is configured, to that file as well.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from seo_toolkit.config import settings
from seo_toolkit.constants import LOG_FORMAT, NOISY_LOGGERS


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = LOG_FORMAT,
) -> None:
    """Configure the root logger for a toolkit run.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
        log_file: Extra log file; defaults to the LOG_FILE setting
        format_string: Record format shared by every handler
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=format_string,
        handlers=_build_handlers(log_file),
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
