"""
Utility helpers shared across uafilter packages.
"""

from .logging import apply_log_level, configure_logging, get_logger

__all__ = ["apply_log_level", "configure_logging", "get_logger"]
