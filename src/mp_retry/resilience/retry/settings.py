"""Resilience – RetrySettings (env-driven retry configuration)."""
from __future__ import annotations

import dataclasses
import inspect
import math
import pkgutil
from typing import ClassVar

from mp_retry.config.settings import Settings
from mp_retry.config.validation import InvalidSettingValueError
from mp_retry.resilience.retry.policy import DelayUnit, RetryPolicy


@dataclasses.dataclass
class RetrySettings(Settings):
    """Retry defaults read from ``RETRY_*`` environment variables.

    ``types`` and ``ignore`` hold dotted exception names such as
    ``builtins.OSError``; an empty ``types`` retries every exception.
    """

    _prefix: ClassVar[str] = "RETRY"

    attempts: int = 3
    delay: float = 50.0
    unit: str = DelayUnit.MILLISECONDS.value
    verbose: bool = True
    randomize: bool = True
    types: list[str] = dataclasses.field(default_factory=list)
    ignore: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        if self.attempts < 1:
            raise InvalidSettingValueError("attempts", self.attempts, "must be >= 1")
        if not math.isfinite(self.delay) or self.delay < 0:
            raise InvalidSettingValueError("delay", self.delay, "must be a finite number >= 0")
        if self.unit not in {u.value for u in DelayUnit}:
            raise InvalidSettingValueError("unit", self.unit, "unknown delay unit")

    def to_policy(self) -> RetryPolicy:
        return RetryPolicy.of(
            attempts=self.attempts,
            delay=self.delay,
            unit=self.unit,
            types=[_resolve_exception("types", n) for n in self.types] or (Exception,),
            ignore=[_resolve_exception("ignore", n) for n in self.ignore],
            verbose=self.verbose,
            randomize=self.randomize,
        )


def _resolve_exception(setting: str, dotted: str) -> type[BaseException]:
    try:
        target = pkgutil.resolve_name(dotted)
    except (ImportError, AttributeError, ValueError) as exc:
        raise InvalidSettingValueError(setting, dotted, "cannot be imported") from exc
    if not (inspect.isclass(target) and issubclass(target, BaseException)):
        raise InvalidSettingValueError(setting, dotted, "is not an exception class")
    return target


__all__ = ["RetrySettings"]
