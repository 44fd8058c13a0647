"""Minimal logging utilities for Taggart.

Wraps the standard library logging. Taggart only emits DEBUG records and
never installs handlers; configure the "taggart" logger to see them.

Example:
    >>> from taggart.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering attributes")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the "taggart." namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'taggart.mymodule'
        >>> get_logger("taggart.attributes").name
        'taggart.attributes'
    """
    if not (name == "taggart" or name.startswith("taggart.")):
        name = f"taggart.{name}"
    return logging.getLogger(name)
