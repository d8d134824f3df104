"""Services for the client library."""

from .client import Client, Response
from .session import get_session, close_session

__all__ = [
    "Client",
    "Response",
    "get_session",
    "close_session",
]
