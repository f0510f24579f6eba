"""Resilience – retry policy, executor, backoff/jitter and observability hooks."""
from mp_retry.resilience.retry.attempt import AttemptResult, Failure, RetryAttemptEvent, Success, attempt
from mp_retry.resilience.retry.backoff import BackoffStrategy, FlatBackoff
from mp_retry.resilience.retry.decorator import retry_on_failure
from mp_retry.resilience.retry.executor import RetryExecutor
from mp_retry.resilience.retry.jitter import FullJitter, JitterStrategy, NoJitter
from mp_retry.resilience.retry.listeners import LoggingRetryListener, MetricsRetryListener, RetryListener
from mp_retry.resilience.retry.matchers import KindIs, KindMatcher, failure_kind
from mp_retry.resilience.retry.policy import DelayUnit, RetryDecision, RetryPolicy
from mp_retry.resilience.retry.settings import RetrySettings
from mp_retry.resilience.retry.tenacity_adapter import TenacityRetryExecutor

__all__ = [
    "AttemptResult",
    "BackoffStrategy",
    "DelayUnit",
    "Failure",
    "FlatBackoff",
    "FullJitter",
    "JitterStrategy",
    "KindIs",
    "KindMatcher",
    "LoggingRetryListener",
    "MetricsRetryListener",
    "NoJitter",
    "RetryAttemptEvent",
    "RetryDecision",
    "RetryExecutor",
    "RetryListener",
    "RetryPolicy",
    "RetrySettings",
    "Success",
    "TenacityRetryExecutor",
    "attempt",
    "failure_kind",
    "retry_on_failure",
]
