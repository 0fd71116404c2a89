#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the htmlmark command-line tool.

The library modules only create module loggers under the ``htmlmark``
namespace and never attach handlers. Entry points call
:func:`configure_logging` to route those records to stderr and, optionally,
to a log file.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER_NAME = "htmlmark"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated calls replace only our own
_HANDLER_MARKER = "_htmlmark_cli_handler"

logger = logging.getLogger(__name__)


def resolve_log_level(log_level: int | str, verbose: bool = False) -> int:
    """Turn a level name or number into a numeric level.

    ``verbose`` forces DEBUG. Unknown names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str = "WARNING",
    *,
    verbose: bool = False,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the ``htmlmark`` logger.

    Parameters
    ----------
    log_level : int | str, default "WARNING"
        Numeric logging level or level name.
    verbose : bool, default False
        Shortcut for DEBUG level.
    log_file : str, optional
        Path of a file that receives the same records as the console.
    trace_mode : bool, default False
        Include timestamps, logger names and line numbers in every record.
    stream : TextIO, optional
        Console stream. Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = resolve_log_level(log_level, verbose)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(CONSOLE_FORMAT)
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARKER, True)
        package_logger.addHandler(handler)

    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return package_logger
