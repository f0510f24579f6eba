"""Unit tests for sleepers and CancellationToken."""

from __future__ import annotations

import asyncio
import threading
import time

import pytest

from mp_retry.kernel.errors import RetryCancelledError
from mp_retry.kernel.time import AsyncioSleeper, CancellationToken, SystemSleeper


class TestCancellationToken:
    def test_starts_uncancelled(self) -> None:
        token = CancellationToken()
        assert token.is_cancelled is False
        token.raise_if_cancelled(3)

    def test_cancel(self) -> None:
        token = CancellationToken()
        token.cancel()
        assert token.is_cancelled is True
        with pytest.raises(RetryCancelledError) as exc_info:
            token.raise_if_cancelled(3)
        assert exc_info.value.attempt == 3

    def test_wait_times_out(self) -> None:
        assert CancellationToken().wait(0.01) is False

    def test_wait_returns_early_on_cancel(self) -> None:
        token = CancellationToken()
        threading.Timer(0.02, token.cancel).start()
        started = time.monotonic()
        assert token.wait(10) is True
        assert time.monotonic() - started < 5


class TestSystemSleeper:
    def test_zero_returns_immediately(self) -> None:
        started = time.monotonic()
        SystemSleeper().sleep(0)
        assert time.monotonic() - started < 0.5

    def test_sleeps(self) -> None:
        started = time.monotonic()
        SystemSleeper().sleep(0.02)
        assert time.monotonic() - started >= 0.015

    def test_cancellation_aborts_wait(self) -> None:
        token = CancellationToken()
        threading.Timer(0.02, token.cancel).start()
        started = time.monotonic()
        SystemSleeper().sleep(10, token)
        assert time.monotonic() - started < 5


class TestAsyncioSleeper:
    def test_sleeps(self) -> None:
        async def run() -> float:
            started = time.monotonic()
            await AsyncioSleeper().sleep(0.01)
            return time.monotonic() - started

        assert asyncio.run(run()) >= 0.005

    def test_negative_is_zero(self) -> None:
        asyncio.run(AsyncioSleeper().sleep(-1))
