"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from tutorbot.observability.correlation import get_correlation_id, set_correlation_id
from tutorbot.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
