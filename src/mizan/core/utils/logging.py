"""
Loguru sinks for mizan.

The engine only emits through ``loguru.logger``; sinks are attached here,
from the ``logging`` section of the config, when the CLI starts. Embedding
applications can call setup_logging() themselves or keep their own sinks.
"""

import sys

from loguru import logger

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = CONSOLE_FORMAT,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Replace any existing sinks with a stderr sink and an optional log file.

    Args:
        level: Minimum log level name, any case (e.g. "info").
        log_file: Path to a log file. If None, only stderr is used.
        fmt: Format for the stderr sink.
        rotation: When to rotate the log file, in loguru's size or interval syntax.
        retention: How long rotated files are kept, in loguru's syntax.
    """
    level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(log_file, level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)
        logger.debug(f"Logging to {log_file} (rotation {rotation}, retention {retention})")
