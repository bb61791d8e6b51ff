#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Logging setup for the md2docx command line.

Log output always goes to stderr so ``md2docx convert -o -`` can stream the
document on stdout. ``--verbose`` and ``--log-level`` only open up the
``md2docx`` loggers; third-party libraries stay at WARNING unless ``--trace``
is given.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "md2docx"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str, verbose: bool = False, trace: bool = False) -> int:
    """Turn the CLI logging flags into a numeric level.

    ``trace`` wins over ``verbose``, and ``verbose`` only applies while
    ``log_level`` is still the WARNING default.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if trace:
        return logging.DEBUG
    if isinstance(log_level, int):
        level = log_level
    else:
        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level!r}")
    if verbose and level == logging.WARNING:
        return logging.DEBUG
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optional file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Level for the ``md2docx`` loggers, as a number or a name such as "INFO"
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Apply ``log_level`` to every logger and add timestamps and logger names

    Returns
    -------
    logging.Logger
        The ``md2docx`` package logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level if trace_mode else max(level, logging.WARNING))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning(f"Could not create log file {log_file}: {exc}")
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            package_logger.info(f"Logging to file: {log_file}")

    return package_logger
