"""Loguru logging configuration.

Call setup_logging() once at startup. Every other module does
`from loguru import logger`. Menu text for the customer is printed to stdout;
only diagnostics go through loguru.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
LOG_FILENAME = "coffee_shop.log"


def setup_logging(level: str = "WARNING", log_dir: Path | None = None) -> Path | None:
    """Replace loguru's default handler with the menu's sinks.

    Args:
        level: Minimum level for every sink. WARNING keeps stderr quiet while
            the menu is in use; normal input mistakes are logged below it.
        log_dir: If given, also write a rotating `coffee_shop.log` there.

    Returns:
        Path of the log file, or None when only stderr is configured.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME
    logger.add(
        log_file,
        level=level,
        rotation="3 hours",
        retention="1 day",
        format=FILE_FORMAT,
    )
    logger.debug("Writing logs to {}", log_file)
    return log_file
