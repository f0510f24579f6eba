"""Resilience – backoff strategies."""
from __future__ import annotations

import abc
import random

from mp_retry.resilience.retry.jitter import FullJitter, JitterStrategy, NoJitter
from mp_retry.resilience.retry.policy import RetryPolicy


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class FlatBackoff(BackoffStrategy):
    """Same nominal delay after every attempt, with optional jitter on top."""

    def __init__(self, base_delay: float, jitter: JitterStrategy | None = None) -> None:
        self._base = base_delay
        self._jitter = jitter or NoJitter()

    @property
    def base_delay(self) -> float:
        return self._base

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._jitter.apply(self._base)

    @classmethod
    def for_policy(cls, policy: RetryPolicy, rng: random.Random | None = None) -> "FlatBackoff":
        jitter: JitterStrategy = FullJitter(rng) if policy.randomize else NoJitter()
        return cls(policy.base_delay, jitter)


__all__ = ["BackoffStrategy", "FlatBackoff"]
