"""Bounded fixed-delay retry primitive."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")


async def sleep(delay: float) -> None:
    await asyncio.sleep(delay)


class RetryableError(Exception):
    """Marker for failures worth another attempt."""


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 1
    delay: float = 0.0  # seconds

    @property
    def times(self) -> int:
        return 1 if self.max_attempts < 1 else self.max_attempts

    async def run(self, work: Callable[[], Awaitable[T]]) -> T:
        """Await ``work()`` until it succeeds, raises a non-retryable error,
        or ``times`` attempts have been made.

        Only ``RetryableError`` triggers another attempt; the last one is
        re-raised once attempts are exhausted.
        """
        attempt = 0
        last_error: Optional[RetryableError] = None
        while attempt < self.times:
            attempt += 1
            try:
                return await work()
            except RetryableError as exc:
                last_error = exc
                if attempt >= self.times:
                    break
                await sleep(self.delay)
        assert last_error is not None
        raise last_error


__all__ = ["RetryPolicy", "RetryableError"]
