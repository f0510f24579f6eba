"""Resilience – RetryPolicy, RetryDecision and DelayUnit."""
from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Iterable

from mp_retry.kernel.errors import InvalidPolicyError, RetryCancelledError
from mp_retry.resilience.retry.matchers import KindMatcher, is_matcher, matches_any


class RetryDecision(str, Enum):
    RETRY = "RETRY"
    IGNORE = "IGNORE"


class DelayUnit(str, Enum):
    """Units accepted for a policy delay, converted to seconds."""

    NANOSECONDS = "ns"
    MICROSECONDS = "us"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"
    DAYS = "d"

    def to_seconds(self, value: float) -> float:
        return value * _UNIT_SECONDS[self]


_UNIT_SECONDS: dict[DelayUnit, float] = {
    DelayUnit.NANOSECONDS: 1e-9,
    DelayUnit.MICROSECONDS: 1e-6,
    DelayUnit.MILLISECONDS: 1e-3,
    DelayUnit.SECONDS: 1.0,
    DelayUnit.MINUTES: 60.0,
    DelayUnit.HOURS: 3600.0,
    DelayUnit.DAYS: 86400.0,
}


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration.

    ``max_attempts`` counts every invocation, the first one included.
    ``base_delay`` is in seconds. A failure is retried only when it matches
    one of ``retryable`` and none of ``ignored``; the default retries every
    ``Exception``.
    """

    max_attempts: int = 3
    base_delay: float = 0.05
    randomize: bool = True
    verbose: bool = True
    retryable: tuple[KindMatcher, ...] = (Exception,)
    ignored: tuple[KindMatcher, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise InvalidPolicyError("max_attempts", self.max_attempts, "must be an integer")
        if self.max_attempts < 1:
            raise InvalidPolicyError("max_attempts", self.max_attempts, "must be >= 1")
        if isinstance(self.base_delay, bool) or not isinstance(self.base_delay, (int, float)):
            raise InvalidPolicyError("base_delay", self.base_delay, "must be a number of seconds")
        if not math.isfinite(self.base_delay) or self.base_delay < 0:
            raise InvalidPolicyError("base_delay", self.base_delay, "must be a finite number >= 0")
        object.__setattr__(self, "base_delay", float(self.base_delay))
        object.__setattr__(self, "retryable", _matcher_tuple("retryable", self.retryable))
        object.__setattr__(self, "ignored", _matcher_tuple("ignored", self.ignored))

    @classmethod
    def of(
        cls,
        *,
        attempts: int = 3,
        delay: float = 50,
        unit: DelayUnit | str = DelayUnit.MILLISECONDS,
        types: Iterable[KindMatcher] = (Exception,),
        ignore: Iterable[KindMatcher] = (),
        verbose: bool = True,
        randomize: bool = True,
    ) -> "RetryPolicy":
        """Build a policy from a delay expressed in *unit*."""
        try:
            resolved = DelayUnit(unit)
        except ValueError as exc:
            raise InvalidPolicyError("unit", unit, "unknown delay unit") from exc
        if isinstance(delay, bool) or not isinstance(delay, (int, float)):
            raise InvalidPolicyError("delay", delay, "must be a number")
        return cls(
            max_attempts=attempts,
            base_delay=resolved.to_seconds(delay),
            randomize=randomize,
            verbose=verbose,
            retryable=tuple(types),
            ignored=tuple(ignore),
        )

    def classify(self, failure: BaseException) -> RetryDecision:
        """Decide whether *failure* is worth another attempt.

        Cancellation is never retried, ``ignored`` wins over ``retryable``,
        and anything neither list matches is not retried.
        """
        if isinstance(failure, RetryCancelledError):
            return RetryDecision.IGNORE
        if matches_any(self.ignored, failure):
            return RetryDecision.IGNORE
        if matches_any(self.retryable, failure):
            return RetryDecision.RETRY
        return RetryDecision.IGNORE


def _matcher_tuple(field: str, value: object) -> tuple[KindMatcher, ...]:
    if is_matcher(value):
        # a single class or predicate given where a collection was expected
        value = (value,)
    try:
        matchers = tuple(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidPolicyError(field, value, "must be a collection of matchers") from exc
    for matcher in matchers:
        if not is_matcher(matcher):
            raise InvalidPolicyError(field, matcher, "not an exception type or predicate")
    return matchers


__all__ = ["DelayUnit", "RetryDecision", "RetryPolicy"]
