"""Request configuration model.

A ``RequestConfig`` holds everything resolved from the command line for one
invocation. It is built once by :func:`minicurl.core.arguments.build_config`
and passed to each function that needs it.

Example:
    >>> from minicurl.models.request import RequestConfig
    >>> config = RequestConfig(url="http://example.com/", method="GET")
    >>> config.writes_to_stdout
    True
    >>> config.has_body
    False
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field

from minicurl.models.base import MiniCurlModel


class RequestConfig(MiniCurlModel):
    """Resolved settings for a single request."""

    url: str = Field(..., min_length=1, description="Target URL including scheme")
    method: str = Field(default="GET", min_length=1, description="HTTP method")
    headers: dict[str, str] = Field(default_factory=dict, description="Outgoing headers")
    body: bytes | None = Field(default=None, description="Request body, if any")
    output_file: Path | None = Field(default=None, description="Explicit output path (-o)")
    remote_name: bool = Field(default=False, description="Name output after the remote file (-O)")
    limit_rate: int | None = Field(default=None, gt=0, description="Upload rate in bytes/second")
    max_filesize: int | None = Field(default=None, ge=0, description="Download cap in bytes")
    verbose: int = Field(default=0, ge=0, description="Verbosity count")
    head_only: bool = Field(default=False, description="Show document info only (-I)")

    @property
    def has_body(self) -> bool:
        """Whether a request body is sent (an empty body counts)."""
        return self.body is not None

    @property
    def writes_to_stdout(self) -> bool:
        """Whether the response body goes to standard output."""
        return self.output_file is None and not self.remote_name


__all__ = ["RequestConfig"]
