"""Kernel time – Sleeper protocols + implementations."""
from __future__ import annotations

import asyncio
import time
from typing import Protocol

from mp_retry.kernel.time.cancellation import CancellationToken


class Sleeper(Protocol):
    """Port: blocking wait between attempts, swappable for tests."""

    def sleep(self, seconds: float, cancellation: CancellationToken | None = None) -> None: ...


class AsyncSleeper(Protocol):
    """Port: non-blocking wait between attempts."""

    async def sleep(self, seconds: float) -> None: ...


class SystemSleeper:
    """Production sleeper.

    Without a token this is ``time.sleep``; with one it waits on the token so
    ``cancel()`` ends the wait early.
    """

    def sleep(self, seconds: float, cancellation: CancellationToken | None = None) -> None:
        if seconds <= 0:
            return
        if cancellation is None:
            time.sleep(seconds)
            return
        cancellation.wait(seconds)


class AsyncioSleeper:
    """Production async sleeper delegating to ``asyncio.sleep``."""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(max(0.0, seconds))


__all__ = ["AsyncSleeper", "AsyncioSleeper", "Sleeper", "SystemSleeper"]
