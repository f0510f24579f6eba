"""
mp_retry – retry execution engine.

Import path convention::

    from mp_retry.resilience.retry import RetryExecutor, RetryPolicy, retry_on_failure
    from mp_retry.kernel.errors import InvalidPolicyError, RetryCancelledError
    from mp_retry.observability.logging import JsonLoggerFactory
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
