"""Utility modules for Luthor.

Provides:
- logger: get_logger for logging
"""

from luthor.utils.logger import get_logger

__all__ = [
    "get_logger",
]
