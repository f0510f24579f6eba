"""Kernel time – CancellationToken."""
from __future__ import annotations

import threading

from mp_retry.kernel.errors import RetryCancelledError


class CancellationToken:
    """Thread-safe cancellation flag for synchronous retry loops.

    One thread runs the loop, any other thread may call :meth:`cancel`.
    Waiting on the token returns as soon as it is cancelled.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """Block for up to *seconds*; return ``True`` if cancelled meanwhile."""
        return self._event.wait(timeout=max(0.0, seconds))

    def raise_if_cancelled(self, attempt: int) -> None:
        if self._event.is_set():
            raise RetryCancelledError(attempt)


__all__ = ["CancellationToken"]
