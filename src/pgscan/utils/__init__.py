"""Utility modules for pgscan.

Provides:
- logger: get_logger for namespaced logging
"""

from pgscan.utils.logger import get_logger

__all__ = ["get_logger"]
