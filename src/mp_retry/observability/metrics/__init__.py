"""Observability – metric ports and the no-op backend."""
from mp_retry.observability.metrics.noop import NoopMetrics
from mp_retry.observability.metrics.ports import Counter, Histogram, Metrics

__all__ = ["Counter", "Histogram", "Metrics", "NoopMetrics"]
