"""Retry errors – policy construction and cancellation."""

from __future__ import annotations

from typing import Any

from mp_retry.kernel.errors.base import RetryEngineError


class InvalidPolicyError(RetryEngineError, ValueError):
    """A retry policy was constructed with out-of-range values.

    Raised at construction time and never retried.
    """

    default_code = "invalid_policy"

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid retry policy: {field}={value!r} ({reason})",
            detail={"field": field, "value": repr(value), "reason": reason},
        )
        self.field = field
        self.value = value
        self.reason = reason


class RetryCancelledError(RetryEngineError):
    """A retry loop was cancelled by its caller.

    ``attempt`` is the number of the last attempt that ran before the
    cancellation was observed (0 when cancelled before the first one).
    """

    default_code = "retry_cancelled"

    def __init__(self, attempt: int, message: str | None = None) -> None:
        super().__init__(
            message or f"Retry cancelled after attempt {attempt}",
            detail={"attempt": attempt},
        )
        self.attempt = attempt


__all__ = ["InvalidPolicyError", "RetryCancelledError"]
