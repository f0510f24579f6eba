"""Shared pytest fixtures."""
from mp_retry.testing.fixtures import (  # noqa: F401
    fake_metrics,
    recording_listener,
    recording_sleeper,
    retry_executor,
)
