from __future__ import annotations

import dataclasses

import httpx
import pytest

from notifuse.config import ClientConfig


def test_config_defaults_are_stable():
    config = ClientConfig()

    assert config.base_uri == "https://api.notifuse.com/v2/"
    assert config.agent is None
    assert config.timeout == 5000
    assert config.max_attempts == 5
    assert config.retry_delay == 250


def test_from_options_overrides_key_by_key():
    config = ClientConfig.from_options({"timeout": 1337, "maxAttempts": 2})

    assert config.timeout == 1337
    assert config.max_attempts == 2
    assert config.base_uri == "https://api.notifuse.com/v2/"
    assert config.retry_delay == 250


def test_from_options_accepts_snake_case_aliases():
    config = ClientConfig.from_options({"base_uri": "http://x/", "retry_delay": 10, "max_attempts": 3})

    assert config.base_uri == "http://x/"
    assert config.retry_delay == 10
    assert config.max_attempts == 3


def test_from_options_none_returns_defaults():
    assert ClientConfig.from_options(None) == ClientConfig()


def test_from_options_rejects_unknown_keys():
    with pytest.raises(TypeError):
        ClientConfig.from_options({"host": "http://x/"})


def test_config_is_frozen():
    config = ClientConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.timeout = 1  # type: ignore[misc]


def test_config_rejects_negative_values():
    with pytest.raises(ValueError):
        ClientConfig(timeout=-1)
    with pytest.raises(ValueError):
        ClientConfig(retry_delay=-1)
    with pytest.raises(ValueError):
        ClientConfig(base_uri="")


def test_config_rejects_non_httpx_agent():
    with pytest.raises(TypeError):
        ClientConfig(agent=object())  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_config_accepts_async_client_agent():
    agent = httpx.AsyncClient()
    try:
        assert ClientConfig(agent=agent).agent is agent
    finally:
        await agent.aclose()


def test_retry_delay_seconds():
    assert ClientConfig(retry_delay=250).retry_delay_seconds == 0.25


@pytest.mark.parametrize("max_attempts", ["5", 2.5, None, True])
def test_config_rejects_non_integer_max_attempts(max_attempts):
    with pytest.raises(TypeError, match="maxAttempts"):
        ClientConfig.from_options({"maxAttempts": max_attempts})


@pytest.mark.parametrize("key", ["timeout", "retryDelay"])
@pytest.mark.parametrize("value", ["250", None, False])
def test_config_rejects_non_numeric_durations(key, value):
    with pytest.raises(TypeError, match=key):
        ClientConfig.from_options({key: value})


def test_config_keeps_max_attempts_below_one():
    assert ClientConfig(max_attempts=0).max_attempts == 0
