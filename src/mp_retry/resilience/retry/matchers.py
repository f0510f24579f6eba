"""Resilience – failure-kind matchers."""
from __future__ import annotations

import inspect
from typing import Callable, Iterable, Union

KindMatcher = Union[type[BaseException], Callable[[BaseException], bool]]


def failure_kind(failure: BaseException) -> str:
    """Name the kind of *failure*.

    Errors carrying a non-empty string ``code`` (see
    :class:`~mp_retry.kernel.errors.RetryEngineError`) are named by it,
    everything else by its class name.
    """
    code = getattr(failure, "code", None)
    if isinstance(code, str) and code:
        return code
    return type(failure).__name__


def is_matcher(candidate: object) -> bool:
    if inspect.isclass(candidate):
        return issubclass(candidate, BaseException)
    return callable(candidate)


def matches(matcher: KindMatcher, failure: BaseException) -> bool:
    if inspect.isclass(matcher):
        return isinstance(failure, matcher)
    return bool(matcher(failure))


def matches_any(matchers: Iterable[KindMatcher], failure: BaseException) -> bool:
    return any(matches(m, failure) for m in matchers)


class KindIs:
    """Predicate matcher over :func:`failure_kind` names.

    ``KindIs("timeout", "ConnectionError")`` matches any failure whose kind
    is one of the given names, independent of the class hierarchy.
    """

    __slots__ = ("kinds",)

    def __init__(self, *kinds: str) -> None:
        if not kinds:
            raise ValueError("KindIs needs at least one kind")
        self.kinds = frozenset(kinds)

    def __call__(self, failure: BaseException) -> bool:
        return failure_kind(failure) in self.kinds

    def __eq__(self, other: object) -> bool:
        return isinstance(other, KindIs) and other.kinds == self.kinds

    def __hash__(self) -> int:
        return hash(self.kinds)

    def __repr__(self) -> str:
        return f"KindIs({', '.join(repr(k) for k in sorted(self.kinds))})"


__all__ = ["KindIs", "KindMatcher", "failure_kind", "is_matcher", "matches", "matches_any"]
