"""Execute request descriptors against the API with bounded retries."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import ApiError, NotifuseError, RequestTimeoutError, TransportError
from .request import RequestDescriptor
from .retry import RetryPolicy

logger = logging.getLogger("notifuse.invoker")


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def api_error_message(status_code: int, body: Any, raw: str) -> str:
    """Human readable message for an error response.

    ``error`` wins over the raw body, and ``message`` is appended to it when
    both are present.
    """
    if isinstance(body, dict) and body.get("error"):
        message = str(body["error"])
        if body.get("message"):
            message += f" - {body['message']}"
        return message
    return f"{status_code} {raw}"


class RetryingInvoker:
    """Runs one descriptor to a single outcome.

    Transport failures are retried per ``policy``; responses with a status
    code >= 400 fail immediately with ``ApiError``.
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self._policy = policy

    async def _attempt(self, descriptor: RequestDescriptor) -> Any:
        agent = descriptor.agent
        if agent is None:
            raise ValueError("request descriptor has no agent")
        try:
            response = await agent.request(
                descriptor.method,
                descriptor.url,
                headers=dict(descriptor.headers),
                params=dict(descriptor.params),
                json=descriptor.json,
                timeout=descriptor.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc) or type(exc).__name__) from exc
        except httpx.TransportError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        body = _parse_body(response)
        if response.status_code >= 400:
            message = api_error_message(response.status_code, body, response.text)
            logger.error(
                "API request failed method=%s url=%s status=%s error=%s",
                descriptor.method,
                descriptor.url,
                response.status_code,
                message,
            )
            raise ApiError(message, status_code=response.status_code, body=body)
        return body

    async def invoke(self, descriptor: RequestDescriptor) -> Any:
        attempts = 0

        async def work() -> Any:
            nonlocal attempts
            attempts += 1
            try:
                return await self._attempt(descriptor)
            except TransportError as exc:
                if attempts < self._policy.times:
                    logger.warning(
                        "Transport failure method=%s url=%s attempt=%s/%s error=%s",
                        descriptor.method,
                        descriptor.url,
                        attempts,
                        self._policy.times,
                        exc,
                    )
                raise

        try:
            return await self._policy.run(work)
        except NotifuseError as exc:
            exc.attempts = attempts
            raise


__all__ = ["RetryingInvoker", "api_error_message"]
