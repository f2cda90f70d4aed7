"""Notifuse Python client."""

from .client import Client
from .config import ClientConfig
from .errors import ApiError, NotifuseError, RequestTimeoutError, TransportError
from .version import __version__

__all__ = [
    "Client",
    "ClientConfig",
    "ApiError",
    "NotifuseError",
    "RequestTimeoutError",
    "TransportError",
    "__version__",
]
