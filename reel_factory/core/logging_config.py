"""Logging setup: one console sink, an optional rotating file, and a ``stage`` field per record."""

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[stage]: <9}</magenta> | <cyan>{name}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[stage]} | {name}:{function}:{line} | {message} | {extra}"

# Records logged without a bound stage still need the key for the formats above
DEFAULT_STAGE = "pipeline"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure the console sink and, if ``log_file`` is set, a rotating file sink.

    Args:
        log_level: Minimum level name, case-insensitive
        log_file: Optional path to log file
        rotation: Size at which the file is rotated
        retention: How long rotated files are kept
    """
    level = log_level.upper()
    logger.remove()
    logger.configure(extra={"stage": DEFAULT_STAGE})
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
        )


def get_logger(name: str, **context: Any) -> Any:
    """
    Get a logger bound to ``name`` plus any extra context.

    Args:
        name: Logger name (typically __name__)
        **context: Extra fields, e.g. ``stage="audio"`` or ``catalog="story.json"``

    Returns:
        Bound loguru logger
    """
    return logger.bind(name=name, **context)


setup_logging()
