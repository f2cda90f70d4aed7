"""Argument checks run before any request is scheduled."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def require_callback(callback: Any) -> None:
    if callback is not None and not callable(callback):
        raise TypeError("callback must be a `callback(error, result)` function")


def require_objects(items: Any, name: str) -> None:
    """Require a non-empty list or tuple of mappings."""
    if not isinstance(items, (list, tuple)):
        raise TypeError(f"{name} must be a list")
    if not items:
        raise ValueError(f"{name} must contain at least one object")
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise TypeError(f"{name}[{i}] must be a mapping")


def require_message_id(message_id: Any) -> None:
    if not isinstance(message_id, str):
        raise TypeError("message must be a message ID string")


__all__ = ["require_callback", "require_objects", "require_message_id"]
