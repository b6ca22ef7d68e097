"""Turn raw command-line values into a :class:`RequestConfig`.

Example:
    >>> from minicurl.core.arguments import build_config
    >>> config = build_config("example.com", data='{"a":1}')
    >>> config.url, config.method
    ('http://example.com', 'POST')
    >>> config.headers
    {'Content-Type': 'application/json', 'Content-Length': '7'}
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from minicurl.core.exceptions import ArgumentError, DataFileError
from minicurl.http.content_type import guess_content_type
from minicurl.models.request import RequestConfig
from minicurl.utils.sizes import parse_size

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "http://"


def normalize_url(url: str | None) -> str:
    """Require a URL and default its scheme to ``http://``."""
    if not url:
        raise ArgumentError("no URL specified")
    if "://" not in url:
        return DEFAULT_SCHEME + url
    return url


def resolve_method(
    explicit: str | None,
    *,
    head_only: bool = False,
    has_body: bool = False,
    body_with_get: bool = False,
) -> str:
    """Pick the HTTP method.

    An explicit ``-X`` method always wins. Otherwise ``-I`` means HEAD, a
    body means POST unless ``-G`` was given, and everything else is GET.
    """
    if explicit:
        return explicit.upper()
    if head_only:
        return "HEAD"
    if has_body and not body_with_get:
        return "POST"
    return "GET"


def load_body(data: str | None) -> bytes | None:
    """Resolve ``-d DATA``, reading ``@path`` references from disk."""
    if data is None:
        return None
    if data.startswith("@"):
        path = data[1:]
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise DataFileError(path, e.strerror or str(e)) from e
    return data.encode("utf-8")


def parse_headers(lines: Sequence[str] | None) -> dict[str, str]:
    """Parse ``Key: Value`` header lines.

    Keys and values are whitespace-trimmed. A later line with the same name
    (case-insensitive) replaces the earlier one.
    """
    headers: dict[str, str] = {}
    for line in lines or ():
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            raise ArgumentError(f"malformed header {line!r}, expected 'Key: Value'")
        for existing in list(headers):
            if existing.lower() == key.lower():
                del headers[existing]
        headers[key] = value.strip()
    return headers


def _has_header(headers: dict[str, str], name: str) -> bool:
    return any(key.lower() == name.lower() for key in headers)


def fill_content_headers(headers: dict[str, str], body: bytes | None) -> dict[str, str]:
    """Add Content-Type and Content-Length for a body when not user-supplied."""
    if body is None:
        return headers

    filled = dict(headers)
    if not _has_header(filled, "Content-Type"):
        content_type = guess_content_type(body)
        if content_type is not None:
            filled["Content-Type"] = content_type
    if not _has_header(filled, "Content-Length"):
        filled["Content-Length"] = str(len(body))
    return filled


def _parse_limit(value: str | None, flag: str, *, allow_zero: bool) -> int | None:
    if value is None:
        return None
    size = parse_size(value)
    if size < 0 or (size == 0 and not allow_zero):
        raise ArgumentError(f"{flag} must be {'>=' if allow_zero else '>'} 0, got {value!r}")
    return size


def build_config(
    url: str | None,
    *,
    data: str | None = None,
    get: bool = False,
    output: str | Path | None = None,
    remote_name: bool = False,
    request: str | None = None,
    headers: Sequence[str] | None = None,
    head: bool = False,
    limit_rate: str | None = None,
    max_filesize: str | None = None,
    verbose: int = 0,
) -> RequestConfig:
    """Build the immutable request configuration from raw flag values.

    Arguments are validated before any file or network access except the
    ``@file`` body read.

    Raises:
        ArgumentError: Missing URL, malformed header or size
        DataFileError: ``-d @file`` names an unreadable file
    """
    target = normalize_url(url)
    rate = _parse_limit(limit_rate, "--limit-rate", allow_zero=False)
    cap = _parse_limit(max_filesize, "--max-filesize", allow_zero=True)
    parsed_headers = parse_headers(headers)

    body = load_body(data)
    method = resolve_method(
        request,
        head_only=head,
        has_body=body is not None,
        body_with_get=get,
    )

    config = RequestConfig(
        url=target,
        method=method,
        headers=fill_content_headers(parsed_headers, body),
        body=body,
        output_file=Path(output) if output is not None else None,
        remote_name=remote_name,
        limit_rate=rate,
        max_filesize=cap,
        verbose=verbose,
        head_only=head,
    )
    logger.debug("resolved %s %s with %d headers", config.method, config.url, len(config.headers))
    return config


__all__ = [
    "build_config",
    "fill_content_headers",
    "load_body",
    "normalize_url",
    "parse_headers",
    "resolve_method",
]
