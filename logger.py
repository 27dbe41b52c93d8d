"""Logging for Spendnote.

Everything logs under the "spendnote" logger. Modules get a child logger
from get_logger(__name__), so parser and categorizer DEBUG lines reach the
same handlers as the CLI output.

The file handler records at config.log_level; the console handler, which
carries the CLI's own output, uses config.console_level.
"""

import logging
from datetime import date
from typing import Optional

from config import Config

ROOT_LOGGER_NAME = "spendnote"


def setup_logging(config: Config) -> logging.Logger:
    """Attach file and console handlers to the spendnote logger.

    Safe to call more than once; previous handlers are replaced.

    Args:
        config: Application configuration containing log settings.

    Returns:
        The configured spendnote logger.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    file_level = _level(config.log_level)
    console_level = _level(config.console_level)
    # The logger must pass whatever the more verbose handler wants
    logger.setLevel(min(file_level, console_level))
    logger.handlers.clear()

    # One file per day: spendnote-2025-03-15.log
    file_handler = logging.FileHandler(
        config.log_dir / f"spendnote-{date.today().isoformat()}.log"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def _level(name: str) -> int:
    levels = logging.getLevelNamesMapping()
    if name.upper() not in levels:
        raise ValueError(f"Unknown log level: {name}")
    return levels[name.upper()]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the spendnote logger, or a named child of it.

    Args:
        name: Usually the caller's __name__. None returns the top logger.

    Returns:
        "spendnote" or "spendnote.<name>".
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
