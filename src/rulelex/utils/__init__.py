"""Utility modules for rulelex.

Provides:
- logger: get_logger for logging
"""

from rulelex.utils.logger import get_logger

__all__ = ["get_logger"]
