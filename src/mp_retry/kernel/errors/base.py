"""Root error class for the mp-retry error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class RetryEngineError(Exception):
    """Root of the engine's own errors.

    Args:
        message: Human-readable description.
        code: Machine-readable slug; also used as the failure kind.
        detail: Extra context, kept serialisable for structured logs.
    """

    default_code: str = "retry_engine_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        return {"code": self.code, "message": self.message, "detail": self.detail}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


__all__ = ["RetryEngineError"]
