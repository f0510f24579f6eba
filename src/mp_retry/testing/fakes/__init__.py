"""Testing fakes – in-memory doubles for retry ports."""
from mp_retry.testing.fakes.listener import RecordingRetryListener
from mp_retry.testing.fakes.metrics import FakeMetricsRegistry
from mp_retry.testing.fakes.sleeper import AsyncRecordingSleeper, RecordingSleeper
from mp_retry.testing.fakes.work import ScriptedWork

__all__ = [
    "AsyncRecordingSleeper",
    "FakeMetricsRegistry",
    "RecordingRetryListener",
    "RecordingSleeper",
    "ScriptedWork",
]
