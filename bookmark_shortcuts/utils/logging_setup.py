"""
Logging configuration for bookmark shortcuts.

Console output goes to stderr. A log file is written only when the
configuration names one.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .error_handler import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config=None, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        config: Configuration object providing ``log_level`` and ``log_file``
        log_file: Optional log file path override

    Raises:
        ConfigurationError: If the log file cannot be created
    """
    log_level = config.log_level if config is not None else "WARNING"
    if log_file is None and config is not None:
        log_file = config.log_file

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot open log file {log_path}: {type(e).__name__}: {e}"
            ) from e
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # force=True replaces handlers left by an earlier run in this process
    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file:
        logger.info(f"Logging to file: {log_file}")
