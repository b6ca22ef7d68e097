"""Tests for minicurl.models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from minicurl.models.request import RequestConfig
from minicurl.models.transfer import TransferStats


class TestRequestConfig:
    """Tests for the immutable request configuration."""

    def test_defaults(self) -> None:
        """Default values are correct."""
        config = RequestConfig(url="http://h/")
        assert config.method == "GET"
        assert config.headers == {}
        assert config.body is None
        assert config.limit_rate is None
        assert config.max_filesize is None
        assert config.verbose == 0
        assert config.writes_to_stdout is True
        assert config.has_body is False

    def test_is_immutable(self) -> None:
        """Fields cannot be reassigned."""
        config = RequestConfig(url="http://h/")
        with pytest.raises(ValidationError):
            config.method = "POST"

    def test_rejects_unknown_fields(self) -> None:
        """Extra fields are forbidden."""
        with pytest.raises(ValidationError):
            RequestConfig(url="http://h/", cookies={})

    def test_rejects_invalid_limits(self) -> None:
        """Rate must be positive and cap non-negative."""
        with pytest.raises(ValidationError):
            RequestConfig(url="http://h/", limit_rate=0)
        with pytest.raises(ValidationError):
            RequestConfig(url="http://h/", max_filesize=-1)

    def test_empty_body_counts(self) -> None:
        """An empty body is still a body."""
        assert RequestConfig(url="http://h/", body=b"").has_body is True

    def test_file_output_not_stdout(self) -> None:
        """-o or -O send the body to a file."""
        assert RequestConfig(url="http://h/", output_file=Path("x")).writes_to_stdout is False
        assert RequestConfig(url="http://h/", remote_name=True).writes_to_stdout is False


class TestTransferStats:
    """Tests for transfer counters."""

    def test_record(self) -> None:
        """record() accumulates bytes and chunks."""
        stats = TransferStats()
        stats.record(1024)
        stats.record(976)
        assert stats.total == 2000
        assert stats.chunks == 2

    def test_str(self) -> None:
        """String form mentions truncation."""
        stats = TransferStats(total=2000, chunks=2, truncated=True)
        assert str(stats) == "2,000 bytes in 2 chunks (truncated)"
