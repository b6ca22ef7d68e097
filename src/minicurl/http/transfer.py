"""Response body streaming.

Copies a response body to a file or standard output in fixed-size chunks,
optionally stopping once a download cap is reached.

Example:
    >>> import io
    >>> from minicurl.http.transfer import copy_stream
    >>> out = io.BytesIO()
    >>> stats = copy_stream([b"a" * 1024, b"b" * 1024], out, max_bytes=1500)
    >>> stats.total, stats.truncated
    (1500, True)
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import BinaryIO
from urllib.parse import unquote, urlsplit

import httpx

from minicurl.core.exceptions import OutputError, TransferError
from minicurl.models.request import RequestConfig
from minicurl.models.transfer import TransferStats

logger = logging.getLogger(__name__)

BUFFER_SIZE = 1024

_DISPOSITION_FILENAME = re.compile(r'filename\s*=\s*(?:"([^"]+)"|([^;\s]+))', re.IGNORECASE)


def copy_stream(
    chunks: Iterable[bytes],
    out: BinaryIO,
    *,
    max_bytes: int | None = None,
) -> TransferStats:
    """Copy ``chunks`` to ``out``, stopping at ``max_bytes`` if set.

    When a chunk would go past the cap it is cut to the remaining byte count
    (never below zero) and the copy ends there. A body that is exactly
    ``max_bytes`` long is copied whole and not marked truncated.

    Args:
        chunks: Source of byte chunks
        out: Binary destination
        max_bytes: Maximum bytes to write, None for no cap

    Returns:
        Transfer counters

    Raises:
        OutputError: If writing to ``out`` fails
    """
    stats = TransferStats()
    for chunk in chunks:
        count = len(chunk)
        if max_bytes is not None and stats.total + count > max_bytes:
            count = max(0, max_bytes - stats.total)
            stats.truncated = True

        if count:
            try:
                out.write(chunk[:count])
            except OSError as e:
                raise OutputError(f"write failed: {e}") from e
            stats.record(count)

        if stats.truncated:
            break
    return stats


def iter_response(response: httpx.Response, chunk_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield decoded body chunks, re-raising read failures as TransferError."""
    try:
        yield from response.iter_bytes(chunk_size)
    except httpx.HTTPError as e:
        raise TransferError(f"failed reading response body: {e}") from e


def filename_from_disposition(value: str | None) -> str | None:
    """Extract the suggested filename from a Content-Disposition header.

    Only the base name is kept so a hostile header cannot point outside the
    working directory.

    Example:
        >>> filename_from_disposition('attachment; filename="report.csv"')
        'report.csv'
        >>> filename_from_disposition("inline") is None
        True
    """
    if not value:
        return None
    match = _DISPOSITION_FILENAME.search(value)
    if match is None:
        return None
    name = os.path.basename((match.group(1) or match.group(2)).strip().replace("\\", "/"))
    if name in ("", ".", ".."):
        return None
    return name


def filename_from_url(url: str) -> str | None:
    """Return the last path segment of ``url``, or None if it has none.

    Example:
        >>> filename_from_url("http://example.com/files/data.tar.gz?x=1")
        'data.tar.gz'
        >>> filename_from_url("http://example.com/") is None
        True
    """
    path = urlsplit(url).path
    if not path or path.endswith("/"):
        return None
    name = unquote(PurePosixPath(path).name)
    if name in ("", ".", ".."):
        return None
    return name


def resolve_output_path(config: RequestConfig, headers: Mapping[str, str]) -> Path | None:
    """Decide where the response body goes.

    Returns:
        A file path, or None for standard output

    Raises:
        OutputError: If ``-O`` was requested but no name can be derived
    """
    if config.output_file is not None:
        return config.output_file
    if not config.remote_name:
        return None

    disposition = headers.get("Content-Disposition")
    name = filename_from_disposition(disposition) or filename_from_url(config.url)
    if name is None:
        raise OutputError(f"remote file name has no length: {config.url}")
    logger.debug("using remote name %s", name)
    return Path(name)


@contextmanager
def open_output(path: Path | None) -> Iterator[BinaryIO]:
    """Open the output destination for binary writing.

    A path is created or truncated and closed on exit; None yields standard
    output's binary buffer, which is flushed but left open.

    Raises:
        OutputError: If the file cannot be opened
    """
    if path is None:
        stream = sys.stdout.buffer
        try:
            yield stream
        finally:
            stream.flush()
        return

    try:
        handle = open(path, "wb")
    except OSError as e:
        raise OutputError(f"cannot open {str(path)!r} for writing: {e.strerror or e}") from e
    with handle:
        yield handle


def format_response_info(response: httpx.Response) -> bytes:
    """Render the status line and headers the way ``curl -I`` shows them."""
    encoding = response.headers.encoding
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()]
    for key, value in response.headers.raw:
        lines.append(f"{key.decode(encoding)}: {value.decode(encoding)}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode(encoding)


def download(
    response: httpx.Response,
    config: RequestConfig,
    *,
    chunk_size: int = BUFFER_SIZE,
) -> TransferStats:
    """Write ``response`` to the destination chosen by ``config``.

    Args:
        response: Streaming response with unread body
        config: Request configuration
        chunk_size: Read buffer size

    Returns:
        Transfer counters for the body
    """
    path = resolve_output_path(config, response.headers)
    with open_output(path) as out:
        if config.head_only:
            try:
                out.write(format_response_info(response))
            except OSError as e:
                raise OutputError(f"write failed: {e}") from e
        stats = copy_stream(
            iter_response(response, chunk_size),
            out,
            max_bytes=config.max_filesize,
        )

    logger.info("wrote %s to %s", stats, path if path is not None else "stdout")
    return stats


__all__ = [
    "BUFFER_SIZE",
    "copy_stream",
    "download",
    "filename_from_disposition",
    "filename_from_url",
    "format_response_info",
    "iter_response",
    "open_output",
    "resolve_output_path",
]
