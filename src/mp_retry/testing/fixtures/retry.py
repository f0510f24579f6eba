"""Testing fixtures – recording doubles and a deterministic executor."""
from __future__ import annotations

import random

import pytest

from mp_retry.resilience.retry import RetryExecutor
from mp_retry.testing.fakes import FakeMetricsRegistry, RecordingRetryListener, RecordingSleeper


@pytest.fixture
def recording_sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def recording_listener() -> RecordingRetryListener:
    return RecordingRetryListener()


@pytest.fixture
def fake_metrics() -> FakeMetricsRegistry:
    return FakeMetricsRegistry()


@pytest.fixture
def retry_executor(
    recording_sleeper: RecordingSleeper,
    recording_listener: RecordingRetryListener,
) -> RetryExecutor:
    """RetryExecutor that never really sleeps, with a seeded random source."""
    return RetryExecutor(
        sleeper=recording_sleeper,
        rng=random.Random(1234),
        listeners=[recording_listener],
    )


__all__ = ["fake_metrics", "recording_listener", "recording_sleeper", "retry_executor"]
