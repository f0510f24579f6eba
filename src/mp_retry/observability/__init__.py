"""Observability – structured logging and metrics ports."""
from mp_retry.observability.logging import JsonLoggerFactory, get_logger
from mp_retry.observability.metrics import Counter, Histogram, Metrics, NoopMetrics

__all__ = ["Counter", "Histogram", "JsonLoggerFactory", "Metrics", "NoopMetrics", "get_logger"]
