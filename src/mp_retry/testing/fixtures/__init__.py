"""Testing fixtures – pytest fixtures for retry doubles."""
from mp_retry.testing.fixtures.retry import (
    fake_metrics,
    recording_listener,
    recording_sleeper,
    retry_executor,
)

__all__ = ["fake_metrics", "recording_listener", "recording_sleeper", "retry_executor"]
