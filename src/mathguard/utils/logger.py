"""Minimal logging utilities for mathguard.

Provides a get_logger function that namespaces standard library loggers
under ``mathguard.`` so applications can configure them as one tree.

Example:
    >>> from mathguard.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Preprocessing document")
"""

from __future__ import annotations

import logging

_ROOT = "mathguard"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance under the "mathguard." prefix

    Example:
        >>> get_logger("scanner").name
        'mathguard.scanner'
        >>> get_logger("mathguard.diagnostics").name
        'mathguard.diagnostics'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
