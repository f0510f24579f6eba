"""Observability – structlog configuration and logger helper."""
from mp_retry.observability.logging.factory import JsonLoggerFactory
from mp_retry.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
