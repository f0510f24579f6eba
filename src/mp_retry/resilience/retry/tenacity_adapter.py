"""Resilience – TenacityRetryExecutor adapter.

Drives the same :class:`RetryPolicy` through ``tenacity`` instead of the
built-in loop. Classification, backoff, listeners and the re-raise of the
original failure behave exactly like :class:`RetryExecutor`.
"""
from __future__ import annotations

import asyncio
import random
from typing import Any, Awaitable, Callable, Iterable, TypeVar

import tenacity

from mp_retry.kernel.time import CancellationToken, Sleeper, SystemSleeper
from mp_retry.resilience.retry.attempt import RetryAttemptEvent
from mp_retry.resilience.retry.backoff import FlatBackoff
from mp_retry.resilience.retry.listeners import LoggingRetryListener, RetryListener
from mp_retry.resilience.retry.policy import RetryDecision, RetryPolicy

T = TypeVar("T")


class TenacityRetryExecutor:
    """Retry executor backed by the ``tenacity`` library.

    Provides the same ``run`` / ``run_async`` interface as
    :class:`~mp_retry.resilience.retry.executor.RetryExecutor` so the two are
    interchangeable in application code.

    Parameters
    ----------
    sleeper:
        Blocking wait for :meth:`run`; defaults to :class:`SystemSleeper`.
    async_sleep:
        Coroutine function used by :meth:`run_async`; defaults to
        ``asyncio.sleep``.
    rng:
        Random source for jitter.
    listeners:
        Receivers of :class:`RetryAttemptEvent`, called from tenacity's
        ``before_sleep`` hook.

    Example
    -------
    ::

        executor = TenacityRetryExecutor()
        body = executor.run(RetryPolicy(max_attempts=5), lambda: fetch(url))
    """

    def __init__(
        self,
        *,
        sleeper: Sleeper | None = None,
        async_sleep: Callable[[float], Awaitable[None]] | None = None,
        rng: random.Random | None = None,
        listeners: Iterable[RetryListener] | None = None,
    ) -> None:
        self._sleeper = sleeper or SystemSleeper()
        self._async_sleep = async_sleep or asyncio.sleep
        self._rng = rng or random.Random()
        self._listeners: tuple[RetryListener, ...] = (
            tuple(listeners) if listeners is not None else (LoggingRetryListener(),)
        )

    def _options(self, policy: RetryPolicy) -> dict[str, Any]:
        backoff = FlatBackoff.for_policy(policy, self._rng)

        def before_sleep(retry_state: tenacity.RetryCallState) -> None:
            event = RetryAttemptEvent.from_failure(
                retry_state.outcome.exception(),  # type: ignore[union-attr, arg-type]
                attempt_number=retry_state.attempt_number,
                max_attempts=policy.max_attempts,
                next_delay=retry_state.next_action.sleep,  # type: ignore[union-attr]
                verbose=policy.verbose,
            )
            for listener in self._listeners:
                listener.on_retry(event)

        return {
            "stop": tenacity.stop_after_attempt(policy.max_attempts),
            "wait": lambda retry_state: backoff.compute(retry_state.attempt_number),
            "retry": tenacity.retry_if_exception(
                lambda exc: isinstance(exc, Exception) and policy.classify(exc) is RetryDecision.RETRY
            ),
            "before_sleep": before_sleep,
            "reraise": True,
        }

    def run(
        self,
        policy: RetryPolicy,
        work: Callable[[], T],
        *,
        cancellation: CancellationToken | None = None,
    ) -> T:
        """Execute *work* synchronously with tenacity retry."""
        if cancellation is not None:
            cancellation.raise_if_cancelled(0)
        completed = 0

        def count(retry_state: tenacity.RetryCallState) -> None:
            nonlocal completed
            completed = retry_state.attempt_number

        def sleep(seconds: float) -> None:
            self._sleeper.sleep(seconds, cancellation)
            if cancellation is not None:
                cancellation.raise_if_cancelled(completed)

        retrying = tenacity.Retrying(sleep=sleep, after=count, **self._options(policy))
        return retrying(work)

    async def run_async(self, policy: RetryPolicy, work: Callable[[], Awaitable[T]]) -> T:
        """Execute the coroutine function *work* with tenacity retry."""
        retrying = tenacity.AsyncRetrying(sleep=self._async_sleep, **self._options(policy))
        async for attempt in retrying:
            with attempt:
                result = await work()
        return result  # type: ignore[return-value]


__all__ = ["TenacityRetryExecutor"]
