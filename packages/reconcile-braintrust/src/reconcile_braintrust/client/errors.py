"""Errors raised by REST client implementations."""

from __future__ import annotations

import re
from typing import Any

_API_KEY_RE = re.compile(r"sk-[a-zA-Z0-9-]+")
_BEARER_RE = re.compile(r"Bearer\s+sk-[a-zA-Z0-9-]+")
_AUTH_HEADER_RE = re.compile(r"Authorization:\s*Bearer\s+[a-zA-Z0-9-]+")


def sanitize_message(msg: str) -> str:
    """Redact API keys and bearer tokens from an error message."""
    msg = _AUTH_HEADER_RE.sub("Authorization: Bearer [REDACTED]", msg)
    msg = _BEARER_RE.sub("Bearer [REDACTED]", msg)
    return _API_KEY_RE.sub("[REDACTED]", msg)


class APIError(Exception):
    """Non-2xx response from the remote API."""

    def __init__(
        self, status_code: int, message: str, details: dict[str, Any] | None = None
    ) -> None:
        self.status_code = status_code
        self.message = sanitize_message(message)
        self.details = details or {}
        super().__init__(f"API error: status {status_code}, message: {self.message}")


def _status(err: BaseException) -> int | None:
    return err.status_code if isinstance(err, APIError) else None


def is_not_found(err: BaseException) -> bool:
    return _status(err) == 404


def is_rate_limited(err: BaseException) -> bool:
    return _status(err) == 429


def is_unauthorized(err: BaseException) -> bool:
    return _status(err) == 401
