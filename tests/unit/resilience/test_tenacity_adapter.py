"""Unit tests for TenacityRetryExecutor against the RetryExecutor contract."""

from __future__ import annotations

import asyncio
import random

import pytest

from mp_retry.kernel.errors import RetryCancelledError
from mp_retry.kernel.time import CancellationToken
from mp_retry.resilience.retry import RetryPolicy, TenacityRetryExecutor
from mp_retry.testing.fakes import (
    AsyncRecordingSleeper,
    RecordingRetryListener,
    RecordingSleeper,
    ScriptedWork,
)


class ValidationFailure(Exception):
    pass


class Halt(BaseException):
    pass


def make_executor(
    sleeper: RecordingSleeper | None = None,
    listener: RecordingRetryListener | None = None,
) -> TenacityRetryExecutor:
    return TenacityRetryExecutor(
        sleeper=sleeper or RecordingSleeper(),
        rng=random.Random(11),
        listeners=[listener] if listener is not None else (),
    )


POLICY = RetryPolicy(max_attempts=3, base_delay=0.05, randomize=False, retryable=(OSError,))


class TestTenacityRun:
    def test_succeeds_first_try(self) -> None:
        sleeper = RecordingSleeper()
        work = ScriptedWork(["ok"])
        assert make_executor(sleeper).run(POLICY, work) == "ok"
        assert work.calls == 1
        assert sleeper.delays == []

    def test_fails_twice_then_succeeds(self) -> None:
        sleeper = RecordingSleeper()
        listener = RecordingRetryListener()
        work = ScriptedWork([OSError, OSError, "payload"])

        assert make_executor(sleeper, listener).run(POLICY, work) == "payload"
        assert work.calls == 3
        assert sleeper.delays == [0.05, 0.05]
        assert listener.attempts == [1, 2]
        assert listener.delays == [0.05, 0.05]

    def test_exhaustion_reraises_original_failure(self) -> None:
        work = ScriptedWork([OSError])

        with pytest.raises(OSError) as exc_info:
            make_executor().run(POLICY, work)

        assert work.calls == 3
        assert exc_info.value is work.raised[-1]

    def test_ignored_failure_not_retried(self) -> None:
        sleeper = RecordingSleeper()
        work = ScriptedWork([ValidationFailure("bad"), "never"])
        policy = RetryPolicy(max_attempts=3, ignored=(ValidationFailure,))

        with pytest.raises(ValidationFailure):
            make_executor(sleeper).run(policy, work)

        assert work.calls == 1
        assert sleeper.delays == []

    def test_unmatched_failure_not_retried(self) -> None:
        work = ScriptedWork([KeyError("k"), "never"])

        with pytest.raises(KeyError):
            make_executor().run(POLICY, work)

        assert work.calls == 1

    def test_single_attempt_policy(self) -> None:
        work = ScriptedWork([OSError])

        with pytest.raises(OSError):
            make_executor().run(RetryPolicy(max_attempts=1), work)

        assert work.calls == 1

    def test_randomized_delays_within_bounds(self) -> None:
        sleeper = RecordingSleeper()
        work = ScriptedWork([OSError])

        with pytest.raises(OSError):
            make_executor(sleeper).run(RetryPolicy(max_attempts=40, base_delay=0.4), work)

        assert len(sleeper.delays) == 39
        assert all(0.0 <= d <= 0.4 for d in sleeper.delays)

    def test_terse_events(self) -> None:
        listener = RecordingRetryListener()
        work = ScriptedWork([OSError("flaky"), "ok"])

        make_executor(listener=listener).run(RetryPolicy(verbose=False, base_delay=0), work)

        assert listener.events[0].detail is None
        assert listener.events[0].message == "flaky"

    def test_cancelled_during_backoff(self) -> None:
        token = CancellationToken()
        sleeper = RecordingSleeper(on_sleep=lambda _: token.cancel())
        work = ScriptedWork([OSError, "never"])

        with pytest.raises(RetryCancelledError) as exc_info:
            make_executor(sleeper).run(POLICY, work, cancellation=token)

        assert work.calls == 1
        assert exc_info.value.attempt == 1

    def test_cancelled_before_start(self) -> None:
        token = CancellationToken()
        token.cancel()
        work = ScriptedWork(["never"])

        with pytest.raises(RetryCancelledError):
            make_executor().run(POLICY, work, cancellation=token)

        assert work.calls == 0

    def test_base_exception_not_retried_by_catch_all_predicate(self) -> None:
        listener = RecordingRetryListener()
        work = ScriptedWork([Halt("stop"), "never"])
        policy = RetryPolicy(max_attempts=3, base_delay=0, retryable=(lambda exc: True,))

        with pytest.raises(Halt):
            make_executor(listener=listener).run(policy, work)

        assert work.calls == 1
        assert listener.events == []


class TestTenacityRunAsync:
    def test_async_retries_and_succeeds(self) -> None:
        sleeper = AsyncRecordingSleeper()
        listener = RecordingRetryListener()
        work = ScriptedWork([OSError, "ready"])

        async def run() -> str:
            executor = TenacityRetryExecutor(async_sleep=sleeper.sleep, listeners=[listener])
            return await executor.run_async(POLICY, work.run_async)

        assert asyncio.run(run()) == "ready"
        assert work.calls == 2
        assert sleeper.delays == [0.05]
        assert listener.attempts == [1]

    def test_async_exhausts_and_raises(self) -> None:
        sleeper = AsyncRecordingSleeper()
        work = ScriptedWork([ConnectionError])

        async def run() -> None:
            executor = TenacityRetryExecutor(async_sleep=sleeper.sleep, listeners=())
            await executor.run_async(POLICY, work.run_async)

        with pytest.raises(ConnectionError) as exc_info:
            asyncio.run(run())

        assert work.calls == 3
        assert exc_info.value is work.raised[-1]

    def test_async_ignored_propagates(self) -> None:
        sleeper = AsyncRecordingSleeper()
        work = ScriptedWork([ValidationFailure("no"), "never"])

        async def run() -> None:
            executor = TenacityRetryExecutor(async_sleep=sleeper.sleep, listeners=())
            await executor.run_async(RetryPolicy(ignored=(ValidationFailure,)), work.run_async)

        with pytest.raises(ValidationFailure):
            asyncio.run(run())

        assert work.calls == 1
        assert sleeper.delays == []

    def test_async_base_exception_not_retried_by_catch_all_predicate(self) -> None:
        sleeper = AsyncRecordingSleeper()
        listener = RecordingRetryListener()
        work = ScriptedWork([Halt("stop"), "never"])
        policy = RetryPolicy(max_attempts=3, base_delay=0, retryable=(lambda exc: True,))

        async def run() -> None:
            executor = TenacityRetryExecutor(async_sleep=sleeper.sleep, listeners=[listener])
            await executor.run_async(policy, work.run_async)

        with pytest.raises(Halt):
            asyncio.run(run())

        assert work.calls == 1
        assert sleeper.delays == []
        assert listener.events == []
