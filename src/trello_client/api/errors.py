"""
API Errors

Every failure raised by ``Client.get`` / ``Client.post`` derives from
``TrelloError`` and carries the HTTP method and the request URL
(without query string, so credentials stay out of messages).
"""

from typing import Optional


class TrelloError(Exception):
    """Base class for all client errors."""
    
    def __init__(self, message: str, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class InvalidRequestError(TrelloError):
    """The request could not be constructed (malformed URL or parameters)."""
    
    def __init__(self, method: str, url: str, reason: Optional[str] = None):
        message = f"Invalid {method} request {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, method, url)


class RequestFailureError(TrelloError):
    """The remote host could not be reached (connect, timeout, TLS, protocol)."""
    
    def __init__(self, method: str, url: str, reason: Optional[str] = None):
        message = f"HTTP request failure on {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, method, url)


class RemoteRejectionError(TrelloError):
    """The API answered with a status other than 200."""
    
    def __init__(self, method: str, url: str, status_code: int, body: str):
        super().__init__(
            f"HTTP request failure on {url}: {status_code} {body}",
            method,
            url
        )
        self.status_code = status_code
        self.body = body


class BodyReadError(TrelloError):
    """The response body could not be read."""
    
    def __init__(self, method: str, url: str, status_code: Optional[int] = None):
        super().__init__(f"HTTP read error on response for {url}", method, url)
        self.status_code = status_code


class DecodeError(TrelloError):
    """The response body is not valid JSON or does not fit the target."""
    
    def __init__(
        self,
        method: str,
        url: str,
        reason: Optional[str] = None,
        body: Optional[str] = None
    ):
        message = f"JSON decode failed on {url}"
        if reason:
            message = f"{message}: {reason}"
        if body is not None:
            message = f"{message}\n{body}"
        super().__init__(message, method, url)
        self.body = body
