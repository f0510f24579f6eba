"""Resilience – retry execution engine."""

from mp_retry.resilience.retry import (
    RetryDecision,
    RetryExecutor,
    RetryPolicy,
    TenacityRetryExecutor,
    retry_on_failure,
)

__all__ = [
    "RetryDecision",
    "RetryExecutor",
    "RetryPolicy",
    "TenacityRetryExecutor",
    "retry_on_failure",
]
