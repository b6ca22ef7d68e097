"""Custom exceptions.

minicurl uses a small hierarchy of exceptions. Library code raises them and
only the CLI catches them, reports the message, and exits non-zero.

Example:
    >>> from minicurl.core.exceptions import MiniCurlError, SizeParseError
    >>> isinstance(SizeParseError("bad size"), MiniCurlError)
    True
    >>> try:
    ...     raise SizeParseError("bad size")
    ... except MiniCurlError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: SizeParseError
"""

from __future__ import annotations


class MiniCurlError(Exception):
    """Base exception for minicurl.

    Example:
        >>> from minicurl.core.exceptions import MiniCurlError
        >>> str(MiniCurlError("something went wrong"))
        'something went wrong'
    """


class ArgumentError(MiniCurlError):
    """Command-line arguments are missing or invalid.

    Raised before any network activity.
    """


class SizeParseError(ArgumentError):
    """A size string such as ``11K`` could not be parsed.

    Example:
        >>> from minicurl.core.exceptions import SizeParseError
        >>> raise SizeParseError("empty size")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        SizeParseError: empty size
    """


class DataFileError(MiniCurlError):
    """The file named by ``-d @file`` could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read data file {path!r}: {reason}")


class RequestError(MiniCurlError):
    """Sending the request failed (connection, TLS, protocol)."""


class TransferError(MiniCurlError):
    """Reading the response body failed."""


class OutputError(MiniCurlError):
    """The output destination could not be opened or written."""


__all__ = [
    "MiniCurlError",
    "ArgumentError",
    "SizeParseError",
    "DataFileError",
    "RequestError",
    "TransferError",
    "OutputError",
]
