"""
Logging and metrics for inputguard.
"""

from .logger import get_logger, log_operation, setup_logger
from .metrics import MetricsCollector, generate_metrics

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "MetricsCollector",
    "generate_metrics",
]
