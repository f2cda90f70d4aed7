"""Asyncio client for the Notifuse API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Optional, Set

import httpx

from .completion import Completion
from .config import ClientConfig
from .invoker import RetryingInvoker
from .request import Operation, build_request
from .resources import Contacts, Messages
from .retry import RetryPolicy

logger = logging.getLogger("notifuse.client")


class Client:
    def __init__(
        self,
        api_key: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key:
            raise TypeError("Your project API key is required!")
        if options is not None and not isinstance(options, Mapping):
            raise TypeError("Options should be a mapping!")

        config = ClientConfig.from_options(options)
        self._owns_agent = config.agent is None
        if self._owns_agent:
            # One pooled client per instance, no cap on concurrent connections.
            agent = httpx.AsyncClient(
                limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
                transport=transport,
                follow_redirects=True,
            )
            config = replace(config, agent=agent)
            logger.debug("created owned agent for %s", config.base_uri)

        self.api_key = api_key
        self.config = config
        self._invoker = RetryingInvoker(
            RetryPolicy(max_attempts=config.max_attempts, delay=config.retry_delay_seconds)
        )
        self._tasks: Set[asyncio.Task] = set()

        self.contacts = Contacts(self._make_api_call)
        self.messages = Messages(self._make_api_call)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _call(self, operation: Operation, done: Completion) -> None:
        descriptor = build_request(operation, self.config, self.api_key)
        try:
            result = await self._invoker.invoke(descriptor)
        except Exception as exc:
            done(exc, None)
        else:
            done(None, result)

    def _make_api_call(self, operation: Operation, done: Completion) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self._call(operation, done))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def aclose(self) -> None:
        """Close the agent if this client created it."""
        if self._owns_agent and self.config.agent is not None:
            await self.config.agent.aclose()


__all__ = ["Client"]
