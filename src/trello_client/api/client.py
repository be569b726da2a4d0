"""
API Client Module

HTTP client for the Trello REST API. Builds authenticated GET/POST
requests against a fixed base URL and decodes JSON responses into
caller-supplied targets.

No retries are attempted: every failure is raised to the caller as a
``TrelloError`` subclass.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx

from ..config import config
from .arguments import Arguments
from .decode import decode
from .errors import (
    BodyReadError,
    DecodeError,
    InvalidRequestError,
    RemoteRejectionError,
    RequestFailureError,
)


logger = logging.getLogger(__name__)

# Failures that can surface while reading a streamed response body
_READ_ERRORS = (httpx.HTTPError, httpx.StreamError)

# json.loads raises RecursionError on deeply nested input
_DECODE_ERRORS = (ValueError, TypeError, RecursionError)


class Client:
    """
    HTTP client for the Trello API.
    
    The underlying ``httpx.Client`` is injected by the caller and stays
    owned by the caller. When none is given, the client creates its own
    and closes it on ``close()``.
    
    Example:
        with httpx.Client() as http:
            trello = Client(key, token, http_client=http)
            board = trello.get("boards/123", Arguments(fields="name"), Board)
    """
    
    def __init__(
        self,
        key: str = "",
        token: str = "",
        http_client: Optional[httpx.Client] = None
    ):
        """
        Initialize the API client.
        
        Args:
            key: Trello API key (omitted from requests when empty).
            token: Trello API token (omitted from requests when empty).
            http_client: Transport to send requests through.
        """
        self.base_url = config.api.base_url
        self.key = key
        self.token = token
        
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=config.api.timeout_seconds)
        self.http_client = http_client
        
        logger.debug(f"Client initialized (base_url: {self.base_url})")
    
    def __enter__(self) -> "Client":
        return self
    
    def __exit__(self, *exc_info) -> None:
        self.close()
    
    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self.http_client.close()
    
    def get(
        self,
        path: str,
        args: Optional[Mapping] = None,
        target: Any = None
    ) -> Any:
        """
        Issue a GET request and decode the JSON response.
        
        The body is read while decoding, so a read failure on a 200
        response surfaces as ``DecodeError``; ``post`` reads the body
        first and reports the same failure as ``BodyReadError``.
        
        Args:
            path: Resource path relative to ``base_url`` (e.g. ``"boards/123"``).
            args: Query parameters.
            target: Decode target, see ``trello_client.api.decode``.
        
        Returns:
            The decoded response.
        
        Raises:
            InvalidRequestError: If the request could not be built.
            RequestFailureError: If the API could not be reached.
            RemoteRejectionError: If the status is not 200.
            BodyReadError: If the body of a rejected response could not be read.
            DecodeError: If the body is not JSON matching ``target``.
        """
        url, params = self._prepare(path, args)
        request = self._build_request("GET", url, params)
        response = self._send(request, url)
        
        try:
            if response.status_code != 200:
                self._raise_rejection("GET", response, url)
            
            try:
                return decode(json.loads(response.read()), target)
            except _READ_ERRORS + _DECODE_ERRORS as e:
                raise DecodeError("GET", url, str(e)) from e
        finally:
            response.close()
    
    def post(
        self,
        path: str,
        args: Optional[Mapping] = None,
        target: Any = None
    ) -> Any:
        """
        Issue a POST request and decode the JSON response.
        
        Arguments travel in the query string, as for ``get``; the body is
        empty. The response body is buffered before decoding, and a decode
        failure includes the raw body text in its message.
        
        Raises:
            InvalidRequestError: If the request could not be built.
            RequestFailureError: If the API could not be reached.
            BodyReadError: If the response body could not be read.
            RemoteRejectionError: If the status is not 200.
            DecodeError: If the body is not JSON matching ``target``.
        """
        url, params = self._prepare(path, args)
        request = self._build_request(
            "POST",
            url,
            params,
            headers={"Content-Type": config.api.form_content_type}
        )
        response = self._send(request, url)
        
        try:
            try:
                body = response.read()
            except _READ_ERRORS as e:
                raise BodyReadError("POST", url, response.status_code) from e
            
            if response.status_code != 200:
                raise RemoteRejectionError("POST", url, response.status_code, response.text)
            
            try:
                return decode(json.loads(body), target)
            except _DECODE_ERRORS as e:
                raise DecodeError("POST", url, str(e), body=response.text) from e
        finally:
            response.close()
    
    def _prepare(
        self,
        path: str,
        args: Optional[Mapping]
    ) -> Tuple[str, List[Tuple[str, str]]]:
        """Resolve the request URL and the full, name-ordered parameter list."""
        params = Arguments.coerce(args).to_query_params()
        
        credentials: Dict[str, str] = {}
        if self.key:
            credentials[config.api.key_param] = self.key
        if self.token:
            credentials[config.api.token_param] = self.token
        
        params = [(name, value) for name, value in params if name not in credentials]
        params.extend(credentials.items())
        params.sort(key=lambda pair: pair[0])
        
        return f"{self.base_url}/{path}", params
    
    def _build_request(
        self,
        method: str,
        url: str,
        params: List[Tuple[str, str]],
        headers: Optional[Dict[str, str]] = None
    ) -> httpx.Request:
        try:
            return self.http_client.build_request(method, url, params=params, headers=headers)
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            raise InvalidRequestError(method, url, str(e)) from e
    
    def _send(self, request: httpx.Request, url: str) -> httpx.Response:
        method = request.method
        try:
            response = self.http_client.send(request, stream=True)
        except httpx.UnsupportedProtocol as e:
            raise InvalidRequestError(method, url, str(e)) from e
        except httpx.RequestError as e:
            raise RequestFailureError(method, url, str(e)) from e
        
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response
    
    def _raise_rejection(self, method: str, response: httpx.Response, url: str) -> None:
        """Read a non-200 response and raise it as an error."""
        try:
            response.read()
        except _READ_ERRORS as e:
            raise BodyReadError(method, url, response.status_code) from e
        raise RemoteRejectionError(method, url, response.status_code, response.text)
