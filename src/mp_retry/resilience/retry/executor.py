"""Resilience – RetryExecutor."""
from __future__ import annotations

import functools
import inspect
import logging
import random
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from mp_retry.kernel.time import AsyncioSleeper, AsyncSleeper, CancellationToken, Sleeper, SystemSleeper
from mp_retry.resilience.retry.attempt import Failure, RetryAttemptEvent, Success, attempt
from mp_retry.resilience.retry.backoff import BackoffStrategy, FlatBackoff
from mp_retry.resilience.retry.listeners import LoggingRetryListener, RetryListener
from mp_retry.resilience.retry.policy import RetryDecision, RetryPolicy

T = TypeVar("T")
logger = logging.getLogger(__name__)


class RetryExecutor:
    """Run a zero-argument unit of work under a :class:`RetryPolicy`.

    The executor only holds collaborators; every piece of loop state lives in
    a single ``run`` call, so one instance can serve any number of threads or
    tasks at once.

    Parameters
    ----------
    sleeper:
        Blocking wait used by :meth:`run`. Defaults to :class:`SystemSleeper`.
    async_sleeper:
        Non-blocking wait used by :meth:`run_async`. Defaults to
        :class:`AsyncioSleeper`.
    rng:
        Random source for jitter. Pass a seeded ``random.Random`` for
        reproducible delays.
    listeners:
        Receivers of :class:`RetryAttemptEvent`. Defaults to a single
        :class:`LoggingRetryListener`; pass ``()`` to disable.

    The unit of work runs at least once and at most ``max_attempts`` times.
    Making it safe to repeat is the caller's job.
    """

    def __init__(
        self,
        *,
        sleeper: Sleeper | None = None,
        async_sleeper: AsyncSleeper | None = None,
        rng: random.Random | None = None,
        listeners: Iterable[RetryListener] | None = None,
    ) -> None:
        self._sleeper = sleeper or SystemSleeper()
        self._async_sleeper = async_sleeper or AsyncioSleeper()
        self._rng = rng or random.Random()
        self._listeners: tuple[RetryListener, ...] = (
            tuple(listeners) if listeners is not None else (LoggingRetryListener(),)
        )

    def run(
        self,
        policy: RetryPolicy,
        work: Callable[[], T],
        *,
        cancellation: CancellationToken | None = None,
    ) -> T:
        """Execute *work* synchronously with retry.

        Returns the first successful value. Otherwise re-raises the exception
        of the attempt that ended the loop, unchanged. Cancelling the token
        aborts the backoff wait and raises
        :class:`~mp_retry.kernel.errors.RetryCancelledError`.
        """
        backoff = FlatBackoff.for_policy(policy, self._rng)
        attempt_number = 1
        while True:
            if cancellation is not None:
                cancellation.raise_if_cancelled(attempt_number - 1)
            outcome = attempt(work)
            if isinstance(outcome, Success):
                return outcome.value
            delay = self._prepare_retry(policy, backoff, outcome, attempt_number)
            self._sleeper.sleep(delay, cancellation)
            if cancellation is not None:
                cancellation.raise_if_cancelled(attempt_number)
            attempt_number += 1

    async def run_async(self, policy: RetryPolicy, work: Callable[[], Awaitable[T]]) -> T:
        """Execute the coroutine function *work* with retry.

        The backoff wait yields to the event loop. Cancelling the task raises
        ``asyncio.CancelledError``, which is never retried.
        """
        backoff = FlatBackoff.for_policy(policy, self._rng)
        attempt_number = 1
        while True:
            try:
                return await work()
            except Exception as exc:
                failure = Failure(exc)
            delay = self._prepare_retry(policy, backoff, failure, attempt_number)
            await self._async_sleeper.sleep(delay)
            attempt_number += 1

    def wrap(self, policy: RetryPolicy) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator running every call of the wrapped function through this executor."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            if _is_async_callable(func):

                @functools.wraps(func)
                async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                    return await self.run_async(policy, lambda: func(*args, **kwargs))

                return async_wrapper

            @functools.wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                return self.run(policy, lambda: func(*args, **kwargs))

            return wrapper

        return decorator

    def _prepare_retry(
        self,
        policy: RetryPolicy,
        backoff: BackoffStrategy,
        failure: Failure,
        attempt_number: int,
    ) -> float:
        """Re-raise *failure* if it is terminal, otherwise announce it and return the wait."""
        error = failure.error
        if attempt_number >= policy.max_attempts:
            logger.debug(
                "retry.exhausted attempts=%d kind=%s", attempt_number, failure.kind
            )
            raise error
        if policy.classify(error) is RetryDecision.IGNORE:
            logger.debug("retry.ignored attempt=%d kind=%s", attempt_number, failure.kind)
            raise error
        delay = backoff.compute(attempt_number)
        event = RetryAttemptEvent.from_failure(
            error,
            attempt_number=attempt_number,
            max_attempts=policy.max_attempts,
            next_delay=delay,
            verbose=policy.verbose,
        )
        for listener in self._listeners:
            listener.on_retry(event)
        return delay


def _is_async_callable(func: Callable[..., Any]) -> bool:
    while isinstance(func, functools.partial):
        func = func.func
    return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    )


__all__ = ["RetryExecutor"]
