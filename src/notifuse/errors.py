"""Operational errors delivered through the completion channel.

Usage errors (bad arguments, bad options) are plain ``TypeError`` /
``ValueError`` raised at the call site and never appear here.
"""

from __future__ import annotations

from typing import Any, Optional

from .retry import RetryableError


class NotifuseError(Exception):
    """Base class for failures of a call that reached the transport."""

    def __init__(self, message: str, *, attempts: int = 0) -> None:
        super().__init__(message)
        self.attempts = attempts


class TransportError(NotifuseError, RetryableError):
    """The request never produced a response (connect, DNS, socket)."""


class RequestTimeoutError(TransportError):
    """An attempt exceeded the configured timeout."""


class ApiError(NotifuseError):
    """The API answered with a status code >= 400."""

    def __init__(self, message: str, *, status_code: int, body: Optional[Any] = None, attempts: int = 0) -> None:
        super().__init__(message, attempts=attempts)
        self.status_code = status_code
        self.body = body


__all__ = ["NotifuseError", "TransportError", "RequestTimeoutError", "ApiError"]
