"""Testing support – fakes and pytest fixtures for retry code.

Import the fixtures in your ``conftest.py``::

    from mp_retry.testing.fixtures import recording_listener, recording_sleeper  # noqa: F401
"""

from mp_retry.testing.fakes import (
    AsyncRecordingSleeper,
    FakeMetricsRegistry,
    RecordingRetryListener,
    RecordingSleeper,
    ScriptedWork,
)

__all__ = [
    "AsyncRecordingSleeper",
    "FakeMetricsRegistry",
    "RecordingRetryListener",
    "RecordingSleeper",
    "ScriptedWork",
]
