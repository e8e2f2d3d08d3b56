"""Utility modules for mathguard.

Provides:
- logger: get_logger for namespaced logging
"""

from mathguard.utils.logger import get_logger

__all__ = ["get_logger"]
