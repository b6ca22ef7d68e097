"""Request body content-type inference.

A best-effort guess used when the user sends a body without a
``Content-Type`` header. JSON is tried first, then URL-encoded form data.

Example:
    >>> from minicurl.http.content_type import guess_content_type
    >>> guess_content_type('{"a": 1}')
    'application/json'
    >>> guess_content_type("name=alice&age=30")
    'application/x-www-form-urlencoded'
    >>> guess_content_type("just some text") is None
    True
"""

from __future__ import annotations

import json
import re

JSON = "application/json"
FORM_URLENCODED = "application/x-www-form-urlencoded"

_FORM_PATTERN = re.compile(r".*?=.+?&?\b", re.ASCII)
_JSON_WHITESPACE = " \t\n\r"


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def looks_like_json(data: str) -> bool:
    """Return True if ``data`` starts with a JSON value.

    Text after the first value is ignored, so ``{"a":1}&b=2`` counts as JSON.
    """
    text = data.lstrip(_JSON_WHITESPACE)
    if not text:
        return False
    try:
        _DECODER.raw_decode(text)
    except ValueError:
        return False
    return True


def looks_like_form(data: str) -> bool:
    """Return True if ``data`` contains ``key=value`` pairs."""
    return _FORM_PATTERN.search(data) is not None


def guess_content_type(body: str | bytes) -> str | None:
    """Guess the content type of a request body.

    Args:
        body: Request body as text or raw bytes

    Returns:
        The MIME type, or None when no header should be set
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if looks_like_json(body):
        return JSON
    if looks_like_form(body):
        return FORM_URLENCODED
    return None


__all__ = [
    "JSON",
    "FORM_URLENCODED",
    "guess_content_type",
    "looks_like_form",
    "looks_like_json",
]
