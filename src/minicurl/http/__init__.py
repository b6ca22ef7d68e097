"""minicurl HTTP utilities.

Provides the request client, upload throttling, content-type inference and
response streaming.

Example:
    >>> from minicurl.http import HttpClient, download
    >>>
    >>> with HttpClient() as client:  # doctest: +SKIP
    ...     with client.stream(config) as response:
    ...         download(response, config)
"""

from minicurl.http.client import HttpClient, write_request_info
from minicurl.http.content_type import guess_content_type
from minicurl.http.rate_limiter import RateLimitedReader, TokenBucket
from minicurl.http.transfer import copy_stream, download, resolve_output_path

__all__ = [
    "HttpClient",
    "RateLimitedReader",
    "TokenBucket",
    "copy_stream",
    "download",
    "guess_content_type",
    "resolve_output_path",
    "write_request_info",
]
