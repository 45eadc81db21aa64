"""Minimal logging utilities for ircprims.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications decide where records go.

Example:
    >>> from ircprims.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.name
    'ircprims.utils.logger'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ircprims." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("composer")
        >>> logger.name
        'ircprims.composer'
    """
    if not (name == "ircprims" or name.startswith("ircprims.")):
        name = f"ircprims.{name}"
    return logging.getLogger(name)
