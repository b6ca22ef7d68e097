"""
minicurl - a small curl-like HTTP client.

Builds one HTTP request from command-line flags, sends it, and streams the
response body to a file or standard output.

Key Features:
- Method, header and body flags modelled on curl
- Content-Type inference for JSON and form bodies
- Upload throttling with a token bucket (--limit-rate)
- Download cap (--max-filesize)
- Output named after the remote file (-O)

Quick Start:
    >>> from minicurl import HttpClient, build_config, download
    >>> config = build_config("example.com", data="q=1")
    >>> with HttpClient() as client:  # doctest: +SKIP
    ...     with client.stream(config) as response:
    ...         download(response, config)
"""

__version__ = "0.1.0"

from minicurl.core.arguments import build_config
from minicurl.core.exceptions import MiniCurlError
from minicurl.http import HttpClient, TokenBucket, download, guess_content_type
from minicurl.models import RequestConfig, TransferStats
from minicurl.utils.sizes import parse_size

__all__ = [
    "HttpClient",
    "MiniCurlError",
    "RequestConfig",
    "TokenBucket",
    "TransferStats",
    "build_config",
    "download",
    "guess_content_type",
    "parse_size",
    "__version__",
]
