"""Resilience – per-attempt outcomes and the retry observability record."""
from __future__ import annotations

import dataclasses
import traceback
from typing import Any, Callable, Generic, NoReturn, TypeAlias, TypeVar

from mp_retry.resilience.retry.matchers import failure_kind

T = TypeVar("T")


class Success(Generic[T]):
    """The unit of work returned a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class Failure:
    """The unit of work raised; keeps the original exception untouched."""

    __slots__ = ("_error",)

    def __init__(self, error: Exception) -> None:
        self._error = error

    @property
    def error(self) -> Exception:
        return self._error

    @property
    def kind(self) -> str:
        return failure_kind(self._error)

    @property
    def message(self) -> str:
        return str(self._error) or type(self._error).__name__

    @property
    def detail(self) -> str:
        return format_detail(self._error)

    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self._error

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


AttemptResult: TypeAlias = "Success[T] | Failure"


def attempt(work: Callable[[], T]) -> Success[T] | Failure:
    """Invoke *work* once; ``BaseException`` subclasses are not captured."""
    try:
        return Success(work())
    except Exception as exc:
        return Failure(exc)


def format_detail(error: BaseException) -> str:
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


@dataclasses.dataclass(frozen=True)
class RetryAttemptEvent:
    """One failed attempt that is about to be retried."""

    attempt_number: int
    max_attempts: int
    failure_kind: str
    message: str
    next_delay: float
    detail: str | None = None
    error: BaseException | None = dataclasses.field(default=None, compare=False, repr=False)

    @classmethod
    def from_failure(
        cls,
        failure: BaseException,
        *,
        attempt_number: int,
        max_attempts: int,
        next_delay: float,
        verbose: bool,
    ) -> "RetryAttemptEvent":
        return cls(
            attempt_number=attempt_number,
            max_attempts=max_attempts,
            failure_kind=failure_kind(failure),
            message=str(failure) or type(failure).__name__,
            next_delay=next_delay,
            detail=format_detail(failure) if verbose else None,
            error=failure,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "attempt": self.attempt_number,
            "max_attempts": self.max_attempts,
            "kind": self.failure_kind,
            "message": self.message,
            "next_delay": self.next_delay,
        }
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload


__all__ = ["AttemptResult", "Failure", "RetryAttemptEvent", "Success", "attempt", "format_detail"]
