# Utils module
from .observability import (
    Logger,
    MetricsRegistry,
    get_metrics,
    initialize_observability,
    CORRELATION_ID,
)

__all__ = [
    "Logger",
    "MetricsRegistry",
    "get_metrics",
    "initialize_observability",
    "CORRELATION_ID",
]
