"""Kernel – errors, sleepers and cancellation shared by every other package."""

from mp_retry.kernel.errors import InvalidPolicyError, RetryCancelledError, RetryEngineError
from mp_retry.kernel.time import (
    AsyncioSleeper,
    AsyncSleeper,
    CancellationToken,
    Sleeper,
    SystemSleeper,
)

__all__ = [
    "AsyncSleeper",
    "AsyncioSleeper",
    "CancellationToken",
    "InvalidPolicyError",
    "RetryCancelledError",
    "RetryEngineError",
    "Sleeper",
    "SystemSleeper",
]
