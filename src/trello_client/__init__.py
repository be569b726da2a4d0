"""
Trello API Client

Minimal binding for the Trello REST API: authenticated GET/POST
requests with JSON responses decoded into caller-supplied targets.
"""

from .api import (
    Arguments,
    BodyReadError,
    Client,
    DecodeError,
    InvalidRequestError,
    RemoteRejectionError,
    RequestFailureError,
    TrelloError,
)
from .config import config
from .log import setup_logging

DEFAULT_BASE_URL = config.api.base_url

__all__ = [
    "Arguments",
    "Client",
    "DEFAULT_BASE_URL",
    "TrelloError",
    "InvalidRequestError",
    "RequestFailureError",
    "RemoteRejectionError",
    "BodyReadError",
    "DecodeError",
    "config",
    "setup_logging",
]
