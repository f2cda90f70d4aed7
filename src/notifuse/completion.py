"""Bridge ``callback(error, result)`` completion and awaitable futures."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

Completion = Callable[[Optional[BaseException], Any], None]


def complete(run: Callable[[Completion], Awaitable[Any]], callback: Optional[Completion] = None) -> Awaitable[Any]:
    """Start ``run`` with a completion function and return something to await.

    With a ``callback`` the call is a passthrough and the awaitable driving
    the operation is returned. Without one, an ``asyncio.Future`` is returned
    that is rejected with the error or resolved with the result.
    """
    if callback is not None:
        return run(callback)

    future = asyncio.get_running_loop().create_future()

    def settle(error: Optional[BaseException], result: Any = None) -> None:
        # Settles at most once; a future cancelled by the caller stays cancelled.
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    run(settle)
    return future


__all__ = ["Completion", "complete"]
