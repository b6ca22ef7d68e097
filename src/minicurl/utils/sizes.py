"""Human-readable size parsing.

Sizes are a base-10 integer with an optional single-letter multiplier:
``K`` (1024), ``M`` (1024**2) or ``G`` (1024**3), case-insensitive.

Example:
    >>> from minicurl.utils.sizes import parse_size
    >>> parse_size("11K")
    11264
    >>> parse_size("5m")
    5242880
    >>> parse_size("100")
    100
"""

from __future__ import annotations

import re

from minicurl.core.exceptions import SizeParseError

MULTIPLIERS = {
    "k": 1024,
    "m": 1024 * 1024,
    "g": 1024 * 1024 * 1024,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, original: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise SizeParseError(f"invalid size {original!r}: {text!r} is not an integer")
    return int(text, 10)


def parse_size(value: str) -> int:
    """Convert a size string to a byte count.

    Args:
        value: Size such as ``"2G"``, ``"11k"`` or ``"512"``

    Returns:
        Number of bytes

    Raises:
        SizeParseError: If the string is empty or the number is malformed

    Example:
        >>> parse_size("2G")
        2147483648
        >>> parse_size("abcK")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        SizeParseError: invalid size 'abcK'
    """
    if not value:
        raise SizeParseError("empty size")

    multiplier = MULTIPLIERS.get(value[-1].lower())
    if multiplier is None:
        return _parse_int(value, value)
    return _parse_int(value[:-1], value) * multiplier


__all__ = ["MULTIPLIERS", "parse_size"]
