"""Translate logical API operations into HTTP request descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Union

import httpx

from .config import ClientConfig
from .version import USER_AGENT


@dataclass(frozen=True)
class NoBody:
    """No request body; the response is still parsed as JSON."""


@dataclass(frozen=True)
class JsonBody:
    value: Any


Payload = Union[NoBody, JsonBody]


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Operation:
    method: Literal["GET", "POST"]
    endpoint: str
    query: Mapping[str, str] = field(default_factory=_empty_mapping)
    payload: Payload = field(default_factory=NoBody)


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    url: str
    headers: Mapping[str, str]
    params: Mapping[str, str]
    payload: Payload
    timeout: int
    agent: Optional[httpx.AsyncClient]

    @property
    def timeout_seconds(self) -> Optional[float]:
        # 0 disables the per-attempt timeout
        if not self.timeout:
            return None
        return self.timeout / 1000

    @property
    def json(self) -> Any:
        if isinstance(self.payload, JsonBody):
            return self.payload.value
        return None


def build_request(operation: Operation, config: ClientConfig, api_key: str) -> RequestDescriptor:
    headers = {
        "Authorization": f"Bearer {api_key}",
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    return RequestDescriptor(
        method=operation.method,
        url=config.base_uri + operation.endpoint,
        headers=MappingProxyType(headers),
        params=MappingProxyType(dict(operation.query or {})),
        payload=operation.payload,
        timeout=config.timeout,
        agent=config.agent,
    )


__all__ = ["NoBody", "JsonBody", "Payload", "Operation", "RequestDescriptor", "build_request"]
