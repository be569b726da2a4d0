"""
API Client Module

Provides the HTTP client for the Trello REST API.
"""

from .arguments import Arguments
from .client import Client
from .decode import decode
from .errors import (
    BodyReadError,
    DecodeError,
    InvalidRequestError,
    RemoteRejectionError,
    RequestFailureError,
    TrelloError,
)

__all__ = [
    "Arguments",
    "Client",
    "decode",
    "TrelloError",
    "InvalidRequestError",
    "RequestFailureError",
    "RemoteRejectionError",
    "BodyReadError",
    "DecodeError",
]
