"""Logging setup for command-line entry points.

Library modules only create module loggers (``logging.getLogger(__name__)``)
and never configure handlers themselves. Entry points call setup_logging
once on the package logger so that every ``tinyray.*`` logger inherits its
level and handlers.

Example:
    >>> import logging
    >>> from tinyray.utils.logconfig import setup_logging
    >>> logger = setup_logging("tinyray", level=logging.INFO)
"""

import logging
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    name: str,
    level: int = logging.WARNING,
    log_format: str = DEFAULT_FORMAT,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Attach a stderr handler, and optionally a file handler, to a logger.

    Calling it again for the same name replaces the previous handlers, so
    repeated setup never duplicates output.

    Args:
        name: Logger name, usually the top-level package name.
        level: Minimum level that is emitted.
        log_format: ``logging.Formatter`` format string for all handlers.
        log_file: If given, records are also appended to this file.

    Returns:
        The configured logger. It does not propagate to the root logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger
