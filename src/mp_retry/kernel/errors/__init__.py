"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    RetryEngineError
    ├── InvalidPolicyError      (retry.py, also a ValueError)
    ├── RetryCancelledError     (retry.py)
    └── ConfigError             (mp_retry.config.validation)

Failures raised by a unit of work are never wrapped in any of these.
"""

from mp_retry.kernel.errors.base import RetryEngineError
from mp_retry.kernel.errors.retry import InvalidPolicyError, RetryCancelledError

__all__ = [
    "InvalidPolicyError",
    "RetryCancelledError",
    "RetryEngineError",
]
