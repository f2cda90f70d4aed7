from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from notifuse import Client

API_KEY = "xxxxxxxx"
BASE_URI = "https://localapi.notifuse.com/v2/"


@pytest.fixture()
def make_client() -> Callable[..., Client]:
    def factory(handler: Callable[[httpx.Request], Any], **options: Any) -> Client:
        merged = {"baseUri": BASE_URI, "retryDelay": 0}
        merged.update(options)
        return Client(API_KEY, merged, transport=httpx.MockTransport(handler))

    return factory
