"""Configuration objects for the Notifuse Python client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

DEFAULT_BASE_URI = "https://api.notifuse.com/v2/"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_RETRY_DELAY_MS = 250

# Option keys accepted by ``from_options`` mapped to dataclass fields.
_OPTION_FIELDS = {
    "baseUri": "base_uri",
    "base_uri": "base_uri",
    "agent": "agent",
    "timeout": "timeout",
    "maxAttempts": "max_attempts",
    "max_attempts": "max_attempts",
    "retryDelay": "retry_delay",
    "retry_delay": "retry_delay",
}


@dataclass(frozen=True)
class ClientConfig:
    base_uri: str = DEFAULT_BASE_URI
    agent: Optional[httpx.AsyncClient] = None
    timeout: int = DEFAULT_TIMEOUT_MS  # ms, 0 disables the per-attempt timeout
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_delay: int = DEFAULT_RETRY_DELAY_MS  # ms

    def __post_init__(self) -> None:
        if not isinstance(self.base_uri, str) or not self.base_uri:
            raise ValueError("baseUri must be a non-empty string")
        if self.agent is not None and not isinstance(self.agent, httpx.AsyncClient):
            raise TypeError("agent must be an httpx.AsyncClient")
        if not isinstance(self.max_attempts, int) or isinstance(self.max_attempts, bool):
            raise TypeError("maxAttempts must be an integer")
        for name, value in (("timeout", self.timeout), ("retryDelay", self.retry_delay)):
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise TypeError(f"{name} must be a number of milliseconds")
        if self.timeout < 0:
            raise ValueError("timeout must be >= 0")
        if self.retry_delay < 0:
            raise ValueError("retryDelay must be >= 0")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "ClientConfig":
        """Merge caller options over the defaults, key by key."""
        if options is None:
            return cls()
        values: Dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_FIELDS.get(key)
            if field_name is None:
                raise TypeError(f"Unknown option: {key!r}")
            values[field_name] = value
        return cls(**values)

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay / 1000


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URI",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_DELAY_MS",
]
