"""Resource namespaces exposed on the client."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Sequence

from .completion import Completion, complete
from .request import JsonBody, Operation
from .validation import require_callback, require_message_id, require_objects

MakeAPICall = Callable[[Operation, Completion], Awaitable[Any]]


class Contacts:
    name = "contacts"

    def __init__(self, make_api_call: MakeAPICall) -> None:
        self.make_api_call = make_api_call

    def upsert(self, contacts: Sequence[dict], callback: Optional[Completion] = None) -> Awaitable[Any]:
        """Insert or update contacts.

        Resolves with the raw response body (``inserted``, ``updated`` and
        ``failed`` lists are left to the caller).
        """
        require_callback(callback)
        require_objects(contacts, "contacts")
        operation = Operation("POST", "contacts.upsert", payload=JsonBody({"contacts": list(contacts)}))
        return complete(lambda done: self.make_api_call(operation, done), callback)


class Messages:
    name = "messages"

    def __init__(self, make_api_call: MakeAPICall) -> None:
        self.make_api_call = make_api_call

    def send(self, messages: Sequence[dict], callback: Optional[Completion] = None) -> Awaitable[Any]:
        require_callback(callback)
        require_objects(messages, "messages")
        operation = Operation("POST", "messages.send", payload=JsonBody({"messages": list(messages)}))
        return complete(lambda done: self.make_api_call(operation, done), callback)

    def info(self, message_id: str, callback: Optional[Completion] = None) -> Awaitable[Any]:
        require_callback(callback)
        require_message_id(message_id)
        operation = Operation("GET", "messages.info", query={"message": message_id})
        return complete(lambda done: self.make_api_call(operation, done), callback)


__all__ = ["Contacts", "Messages"]
