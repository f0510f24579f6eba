"""Resilience – ``retry_on_failure`` decorator.

Usage::

    @retry_on_failure(attempts=2, types=(OSError,))
    def load(url: str) -> str:
        return urlopen(url).read().decode()
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from mp_retry.resilience.retry.executor import RetryExecutor
from mp_retry.resilience.retry.matchers import KindMatcher
from mp_retry.resilience.retry.policy import DelayUnit, RetryPolicy

_DEFAULT_EXECUTOR = RetryExecutor()


def retry_on_failure(
    func: Callable[..., Any] | None = None,
    *,
    attempts: int = 3,
    delay: float = 50,
    unit: DelayUnit | str = DelayUnit.MILLISECONDS,
    types: Iterable[KindMatcher] = (Exception,),
    ignore: Iterable[KindMatcher] = (),
    verbose: bool = True,
    randomize: bool = True,
    policy: RetryPolicy | None = None,
    executor: RetryExecutor | None = None,
) -> Any:
    """Retry the decorated function (sync or ``async``) when it raises.

    Works bare (``@retry_on_failure``) or with arguments. An explicit
    *policy* replaces the descriptor-style keywords. The policy is built at
    decoration time, so an invalid one fails on import rather than on the
    first call.
    """
    resolved = policy or RetryPolicy.of(
        attempts=attempts,
        delay=delay,
        unit=unit,
        types=types,
        ignore=ignore,
        verbose=verbose,
        randomize=randomize,
    )

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        return (executor or _DEFAULT_EXECUTOR).wrap(resolved)(fn)

    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["retry_on_failure"]
