"""
HTTP Client - Timeout-bounded HTTP requests for nodes.

Every call made through HttpClient carries a timeout. A client is either
bound to an API (base_url + API-key header) or unbound, in which case
endpoints are absolute URLs (e.g. pre-signed upload URLs).

Transport failures surface as NodeTimeoutError or HttpApiError; non-2xx
responses are returned as-is and only raise on raise_for_status().
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import requests
from requests.exceptions import RequestException, Timeout


logger = logging.getLogger(__name__)

# Default timeout in seconds
DEFAULT_TIMEOUT = 30

# Error bodies are truncated to this many characters
MAX_ERROR_BODY = 1000


class NodeTimeoutError(Exception):
    """The server did not answer within the timeout."""

    def __init__(self, message: str, timeout: float, url: str, method: Optional[str] = None):
        self.timeout = timeout
        self.url = url
        self.method = method
        super().__init__(message)


class HttpApiError(Exception):
    """
    A request could not be completed, or completed with a non-2xx status.

    status_code and response_body are None when no response was received.
    response_body is truncated; response_data is the parsed, untruncated body.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        url: Optional[str] = None,
        method: Optional[str] = None,
        response_data: Any = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        self.response_data = response_data
        self.url = url
        self.method = method
        super().__init__(message)


class HttpResponse:
    """Read-only view of a requests.Response."""

    def __init__(self, response: requests.Response, method: Optional[str] = None):
        self._response = response
        self.method = method

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def ok(self) -> bool:
        return self._response.ok

    @property
    def url(self) -> str:
        return str(self._response.url)

    @property
    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        return self._response.json()

    def data(self) -> Any:
        """
        Parse the body leniently.

        Returns None for an empty body, the parsed JSON when the body is
        JSON, and the raw text otherwise.
        """
        if not self._response.content:
            return None
        try:
            return self._response.json()
        except ValueError:
            return self._response.text

    def raise_for_status(self) -> None:
        """Raise HttpApiError for a non-2xx status, keeping the (truncated) body."""
        if self.ok:
            return
        body = self.text
        raise HttpApiError(
            message=f"HTTP {self.status_code}: {self._response.reason}",
            status_code=self.status_code,
            response_body=body[:MAX_ERROR_BODY] if body else None,
            url=self.url,
            method=self.method,
            response_data=self.data(),
        )


class HttpClient:
    """
    HTTP client with timeout enforcement and API-key injection.

    Usage:
        api = HttpClient(base_url="https://api.posty5.com", api_key="secret")
        response = api.request("GET", "/api/short-link", params={"page": 1})
        response.raise_for_status()

        uploads = HttpClient(timeout=120)
        uploads.put(presigned_url, data=b"...")
    """

    def __init__(
        self,
        base_url: str = "",
        default_headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        api_key: Optional[str] = None,
        api_key_header: str = "X-API-Key",
    ):
        """
        Args:
            base_url: Prefix for every endpoint; empty for absolute URLs
            default_headers: Headers sent with every request
            timeout: Timeout in seconds, used unless a request overrides it
            api_key: Sent in api_key_header when given
            api_key_header: Header carrying the API key
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers: Dict[str, str] = dict(default_headers or {})
        if api_key:
            self.headers[api_key_header] = api_key

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}" if self.base_url else endpoint

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Union[Dict[str, Any], str, bytes]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """
        Make HTTP request with timeout enforcement.

        Returns:
            HttpResponse wrapper, whatever its status code

        Raises:
            NodeTimeoutError: If request times out
            HttpApiError: If no response was received
        """
        url = self.build_url(endpoint)
        request_timeout = timeout or self.timeout

        logger.debug(f"{method} {url}")

        try:
            response = requests.request(
                method=method,
                url=url,
                params=params,
                json=json,
                data=data,
                headers={**self.headers, **(headers or {})},
                timeout=request_timeout,
            )
        except Timeout as e:
            raise NodeTimeoutError(
                message=f"Request timed out after {request_timeout:g}s",
                timeout=request_timeout,
                url=url,
                method=method,
            ) from e
        except RequestException as e:
            raise HttpApiError(
                message=f"Request failed: {e}",
                url=url,
                method=method,
            ) from e

        return HttpResponse(response, method=method)

    def put(
        self,
        endpoint: str,
        data: Optional[Union[str, bytes]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """PUT a raw body (file uploads)."""
        return self.request("PUT", endpoint, data=data, headers=headers)
