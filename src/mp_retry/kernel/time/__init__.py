"""Kernel time – Sleeper ports, implementations and cancellation."""
from mp_retry.kernel.time.cancellation import CancellationToken
from mp_retry.kernel.time.sleeper import AsyncioSleeper, AsyncSleeper, Sleeper, SystemSleeper

__all__ = ["AsyncSleeper", "AsyncioSleeper", "CancellationToken", "Sleeper", "SystemSleeper"]
