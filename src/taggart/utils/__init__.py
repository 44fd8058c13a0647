"""Utility modules for Taggart.

Provides:
- logger: get_logger for namespaced logging
"""

from taggart.utils.logger import get_logger

__all__ = ["get_logger"]
