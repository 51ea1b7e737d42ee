"""
Logging for NoteMind, built on Loguru.

The library only binds loggers; applications decide where records go by
calling setup_logging (or configure_logging with a LoggingConfig section).
Fallback warnings carry the failed operation as a bound `operation` field.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from notemind.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> - <level>{message}</level>"
)
FILE_NAME = "notemind_{time:YYYY-MM-DD}.log"


def _with_module(record) -> bool:
    # Records logged through the bare logger have no bound module
    record["extra"].setdefault("module", record["name"])
    return True


def setup_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: str | Path = "logs",
    file_rotation: str = "10 MB",
    file_retention: str = "7 days",
    compression: str = "zip",
    serialize: bool = True,
) -> list[int]:
    """
    Replace all Loguru sinks with a console sink and an optional file sink.

    Args:
        level: Minimum level for every sink
        log_to_file: Add a rotating file sink under log_dir
        log_dir: Directory for log files (created if missing)
        file_rotation: Loguru rotation condition
        file_retention: Loguru retention condition
        compression: Archive format for rotated files
        serialize: Write file records as JSON

    Returns:
        Handler ids of the sinks added
    """
    logger.remove()
    handlers = [
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, filter=_with_module, colorize=True)
    ]

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logger.add(
                log_path / FILE_NAME,
                level=level,
                filter=_with_module,
                rotation=file_rotation,
                retention=file_retention,
                compression=compression,
                serialize=serialize,
                enqueue=True,
            )
        )

    return handlers


def configure_logging(config: "LoggingConfig") -> list[int]:
    """Apply the `logging` section of a Config."""
    return setup_logging(**config.model_dump())


def get_logger(name: str):
    """Get a logger instance for a module."""
    return logger.bind(module=name)
