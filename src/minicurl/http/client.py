"""Blocking HTTP client that issues exactly one request.

Wraps ``httpx.Client`` with the request-building rules of minicurl:
- Request body optionally throttled through a token bucket
- Streaming responses, so the body is copied chunk by chunk
- ``httpx`` failures re-raised as :class:`RequestError`

Example:
    >>> from minicurl.core.arguments import build_config
    >>> from minicurl.http import HttpClient
    >>>
    >>> config = build_config("https://example.com/")
    >>> with HttpClient() as client:  # doctest: +SKIP
    ...     with client.stream(config) as response:
    ...         print(response.status_code)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO

import httpx

from minicurl.core.exceptions import RequestError
from minicurl.http.rate_limiter import RateLimitedReader, TokenBucket
from minicurl.models.request import RequestConfig

logger = logging.getLogger(__name__)

REQUEST_PROTOCOL = "HTTP/1.1"


class HttpClient:
    """Synchronous single-request HTTP client.

    Attributes:
        user_agent: User-Agent header value
        timeout: Request timeout in seconds, None to block indefinitely
        chunk_size: Size of throttled request body chunks
    """

    def __init__(
        self,
        user_agent: str = "minicurl",
        timeout: float | None = None,
        follow_redirects: bool = True,
        chunk_size: int = 1024,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize HTTP client.

        Args:
            user_agent: User-Agent header
            timeout: Request timeout, None for no timeout
            follow_redirects: Follow 3xx responses
            chunk_size: Throttled upload chunk size
            transport: Custom transport (tests use ``httpx.MockTransport``)
        """
        self._user_agent = user_agent
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport
        self.chunk_size = chunk_size
        self._client: httpx.Client | None = None

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def timeout(self) -> float | None:
        """Request timeout in seconds."""
        return self._timeout

    def _ensure_client(self) -> httpx.Client:
        """Get or create the underlying client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers={"User-Agent": self._user_agent},
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> HttpClient:
        self._ensure_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def build_request(self, config: RequestConfig) -> httpx.Request:
        """Build the outgoing request for ``config``.

        With a rate limit, the body is streamed through a token bucket whose
        capacity is one second of transfer.

        Raises:
            RequestError: If the URL or headers are rejected by httpx
        """
        client = self._ensure_client()

        content: Any = None
        if config.has_body:
            if config.limit_rate is not None:
                bucket = TokenBucket(rate=config.limit_rate)
                content = iter(RateLimitedReader(config.body, bucket, self.chunk_size))
            else:
                content = config.body

        try:
            return client.build_request(
                config.method,
                config.url,
                headers=config.headers,
                content=content,
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise RequestError(f"invalid request for {config.url}: {e}") from e

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` and return once the response headers arrive.

        The body is left unread; the caller must close the response.

        Raises:
            RequestError: On connection, timeout or protocol failures
        """
        client = self._ensure_client()
        logger.debug("sending %s %s", request.method, request.url)
        try:
            response = client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise RequestError(f"request timeout: {e}") from e
        except httpx.HTTPError as e:
            raise RequestError(f"request failed: {e}") from e
        logger.debug("received %s %s", response.status_code, response.reason_phrase)
        return response

    @contextmanager
    def stream(self, config: RequestConfig, *, echo: TextIO | None = None) -> Iterator[httpx.Response]:
        """Build, optionally print, and send the request for ``config``.

        Args:
            config: Resolved request configuration
            echo: Stream for the verbose request dump (None to skip)

        Yields:
            The streaming response, closed on exit
        """
        request = self.build_request(config)
        if echo is not None:
            write_request_info(request, echo, separator=config.writes_to_stdout)
        response = self.send(request)
        try:
            yield response
        finally:
            response.close()


def write_request_info(request: httpx.Request, out: TextIO, *, separator: bool = False) -> None:
    """Print the request line and headers.

    Args:
        request: Outgoing request
        out: Text stream to write to
        separator: Print a blank line after the headers
    """
    encoding = request.headers.encoding
    out.write(f"{REQUEST_PROTOCOL} {request.method} {request.url}\n")
    # raw keeps the header names as they were given
    for key, value in request.headers.raw:
        out.write(f"{key.decode(encoding)}: {value.decode(encoding)}\n")
    if separator:
        out.write("\n")
    out.flush()


__all__ = [
    "HttpClient",
    "REQUEST_PROTOCOL",
    "write_request_info",
]
