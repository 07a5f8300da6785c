"""
Observability: logging setup and helpers.
"""

from .log_utils import safe_log_value
from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "safe_log_value"]
