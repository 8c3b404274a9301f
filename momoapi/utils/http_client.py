"""
HTTP client for MTN MoMo API communication.
"""

import requests
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, NamedTuple, Optional, Protocol

from momoapi.constants import (
    DEFAULT_TIMEOUT, HEADER_AUTHORIZATION, HEADER_SUBSCRIPTION_KEY
)
from momoapi.exceptions import TransportError

logger = logging.getLogger(__name__)


class RawResponse(NamedTuple):
    """Status code and undecoded body of an HTTP response."""
    status_code: int
    body: str


class Transport(Protocol):
    """Anything that can issue MoMo API calls against a base URL."""

    def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> RawResponse:
        ...

    def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> RawResponse:
        ...


class HTTPClient:
    """
    HTTP client wrapper for MoMo API requests.
    Issues requests, logs them, and converts connection failures into
    TransportError. Status codes are returned untouched.
    """

    def __init__(self, base_url: str, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for endpoint."""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"MoMo API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {data}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"MoMo API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if HEADER_AUTHORIZATION in sanitized:
            scheme = sanitized[HEADER_AUTHORIZATION].split(' ', 1)[0]
            sanitized[HEADER_AUTHORIZATION] = f'{scheme} ***'
        if HEADER_SUBSCRIPTION_KEY in sanitized:
            sanitized[HEADER_SUBSCRIPTION_KEY] = '***'
        return sanitized

    def _send(self, method: str, endpoint: str, **kwargs) -> RawResponse:
        url = self._get_full_url(endpoint)
        headers = kwargs.get('headers') or {}
        self._log_request(method, url, headers, kwargs.get('json'))

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"MoMo API {method} {url} failed: {str(e)}")
            raise TransportError(str(e)) from e

        self._log_response(response)
        return RawResponse(response.status_code, response.text)

    def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> RawResponse:
        """
        Make POST request to API.

        Args:
            endpoint: API endpoint path
            data: JSON payload, omitted from the request when None
            headers: Request headers

        Returns:
            Status code and raw body

        Raises:
            TransportError: If the request could not be completed
        """
        headers = dict(headers or {})
        if data is not None:
            headers.setdefault('Content-Type', 'application/json')
            return self._send('POST', endpoint, json=data, headers=headers)
        return self._send('POST', endpoint, headers=headers)

    def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> RawResponse:
        """
        Make GET request to API.

        Raises:
            TransportError: If the request could not be completed
        """
        return self._send('GET', endpoint, headers=dict(headers or {}))

    def close(self):
        """Close the session."""
        self.session.close()


@contextmanager
def open_transport(base_url: str, client: Optional[Transport] = None) -> Iterator[Transport]:
    """
    Yield the injected transport, or a fresh HTTPClient that is closed on exit.
    """
    if client is not None:
        yield client
        return

    http_client = HTTPClient(base_url)
    try:
        yield http_client
    finally:
        http_client.close()
