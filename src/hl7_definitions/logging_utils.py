# src/hl7_definitions/logging_utils.py
"""
Logging utilities for hl7_definitions.

Library modules only create loggers under the "hl7_definitions" namespace
and never install handlers; the CLI calls configure_logging once.
"""

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "hl7_definitions"

_VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,  # any value >= 2 maps to DEBUG
}


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. "hl7_definitions.loader"."""
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{LOGGER_NAME}.{short}")


def configure_logging(
    verbosity: int = 0, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Parameters
    ----------
    verbosity : int, default=0
        Verbosity level:
        - 0 -> WARNING
        - 1 -> INFO
        - 2 or higher -> DEBUG
        Must be a non-negative integer.
    stream : IO[str] or None, default=None
        Target stream for the StreamHandler. Defaults to sys.stderr so that
        command output on stdout stays clean.

    Returns
    -------
    logging.Logger
        The configured "hl7_definitions" logger.

    Raises
    ------
    TypeError
        If verbosity is not an int, or if a stream is provided that does not
        have a write method.
    ValueError
        If verbosity is negative.
    """
    if isinstance(verbosity, bool) or not isinstance(verbosity, int):
        raise TypeError(f"verbosity must be int, got {type(verbosity).__name__}")
    if verbosity < 0:
        raise ValueError(f"verbosity must be non-negative, got {verbosity}")

    level = _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    if stream is None:
        stream = sys.stderr
    elif not hasattr(stream, "write"):
        raise TypeError("stream must be file-like (support .write(...))")

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    # Calling twice must not duplicate output; other handler types are kept.
    logger.handlers = [
        h
        for h in logger.handlers
        if isinstance(h, logging.FileHandler)
        or not isinstance(h, logging.StreamHandler)
    ]
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
