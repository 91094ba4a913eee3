"""Minimal logging utilities for ghautolinks.

Provides a simple get_logger function that wraps the standard library logging.
The library never configures handlers; applications decide where records go.

Example:
    >>> from ghautolinks.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building extensions")
"""

from __future__ import annotations

import logging

_ROOT = "ghautolinks"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "ghautolinks." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("factory")
        >>> logger.name
        'ghautolinks.factory'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
