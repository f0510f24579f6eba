"""Resilience – retry listeners (observability hook)."""
from __future__ import annotations

from typing import Any, Protocol

from mp_retry.observability.logging import get_logger
from mp_retry.observability.metrics import Metrics, NoopMetrics
from mp_retry.resilience.retry.attempt import RetryAttemptEvent


class RetryListener(Protocol):
    """Receives one event per retried failure, synchronously, before the backoff wait."""

    def on_retry(self, event: RetryAttemptEvent) -> None: ...


class LoggingRetryListener:
    """Log each retried failure as ``retry.attempt_failed`` at WARNING.

    Verbose events carry ``exc_info`` so the renderer prints the full
    traceback; terse ones only carry the message.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger or get_logger(__name__)

    def on_retry(self, event: RetryAttemptEvent) -> None:
        fields: dict[str, Any] = {
            "attempt": event.attempt_number,
            "max_attempts": event.max_attempts,
            "kind": event.failure_kind,
            "delay": round(event.next_delay, 6),
            "error": event.message,
        }
        if event.detail is not None and event.error is not None:
            fields["exc_info"] = event.error
        self._logger.warning("retry.attempt_failed", **fields)


class MetricsRetryListener:
    """Count retried failures and record backoff delays, labelled by failure kind."""

    def __init__(self, metrics: Metrics | None = None, prefix: str = "retry") -> None:
        metrics = metrics or NoopMetrics()
        self._failed = metrics.counter(
            f"{prefix}.attempts.failed", "Failed attempts that were retried"
        )
        self._backoff = metrics.histogram(
            f"{prefix}.backoff.seconds", "Backoff delay before the next attempt", unit="s"
        )

    def on_retry(self, event: RetryAttemptEvent) -> None:
        labels = {"kind": event.failure_kind}
        self._failed.add(1, labels)
        self._backoff.record(event.next_delay, labels)


__all__ = ["LoggingRetryListener", "MetricsRetryListener", "RetryListener"]
