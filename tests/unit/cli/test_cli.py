"""Tests for the minicurl command line."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from minicurl import __version__, cli
from minicurl.http.client import HttpClient

runner = CliRunner()

# =============================================================================
# Fixtures
# =============================================================================


class FakeServer:
    """MockTransport handler returning a canned response."""

    def __init__(self, content: bytes = b"hello", headers: dict[str, str] | None = None) -> None:
        self.content = content
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(200, content=self.content, headers=self.headers)


@pytest.fixture
def server(monkeypatch: pytest.MonkeyPatch) -> FakeServer:
    """Route every client the CLI creates to a fake server."""
    fake = FakeServer()

    def make_client(**kwargs) -> HttpClient:
        return HttpClient(transport=httpx.MockTransport(fake), **kwargs)

    monkeypatch.setattr(cli, "HttpClient", make_client)
    return fake


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Success Paths
# =============================================================================


class TestCliTransfer:
    """Requests that succeed."""

    def test_get_to_stdout(self, server: FakeServer) -> None:
        """The body is streamed to stdout."""
        result = runner.invoke(cli.app, ["example.com/page"])

        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b"hello"
        assert str(server.requests[0].url) == "http://example.com/page"
        assert server.requests[0].method == "GET"

    def test_json_post(self, server: FakeServer) -> None:
        """-d JSON posts with inferred headers."""
        result = runner.invoke(cli.app, ["-d", '{"a":1}', "http://h/post"])

        assert result.exit_code == 0, result.output
        request = server.requests[0]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Content-Length"] == "7"
        assert json.loads(request.content) == {"a": 1}

    def test_data_from_file(self, server: FakeServer, in_tmp: Path) -> None:
        """-d @file sends the file contents."""
        (in_tmp / "form.txt").write_text("user=bob&id=7")

        result = runner.invoke(cli.app, ["-d", "@form.txt", "-G", "http://h/q"])

        assert result.exit_code == 0, result.output
        request = server.requests[0]
        assert request.method == "GET"
        assert request.content == b"user=bob&id=7"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

    def test_headers_and_method(self, server: FakeServer) -> None:
        """-X and repeated -H are applied."""
        result = runner.invoke(
            cli.app,
            ["-X", "DELETE", "-H", "X-One: 1", "-H", "X-Two:  2 ", "http://h/item/3"],
        )

        assert result.exit_code == 0, result.output
        request = server.requests[0]
        assert request.method == "DELETE"
        assert request.headers["X-One"] == "1"
        assert request.headers["X-Two"] == "2"

    def test_output_file_with_cap(self, server: FakeServer, in_tmp: Path) -> None:
        """-o writes to a file, --max-filesize caps it."""
        server.content = b"z" * 5000

        result = runner.invoke(cli.app, ["-o", "out.bin", "--max-filesize", "2000", "http://h/big"])

        assert result.exit_code == 0, result.output
        assert (in_tmp / "out.bin").read_bytes() == b"z" * 2000
        assert result.stdout_bytes == b""

    def test_remote_name(self, server: FakeServer, in_tmp: Path) -> None:
        """-O names the file from Content-Disposition."""
        server.content = b"a,b\n"
        server.headers = {"Content-Disposition": 'attachment; filename="report.csv"'}

        result = runner.invoke(cli.app, ["-O", "http://h/export"])

        assert result.exit_code == 0, result.output
        assert (in_tmp / "report.csv").read_bytes() == b"a,b\n"

    def test_limit_rate(self, server: FakeServer) -> None:
        """--limit-rate still delivers the whole body."""
        result = runner.invoke(cli.app, ["--limit-rate", "1M", "-d", "k=v", "http://h/"])

        assert result.exit_code == 0, result.output
        assert server.requests[0].content == b"k=v"

    def test_verbose(self, server: FakeServer) -> None:
        """-v prints the request before the body."""
        result = runner.invoke(cli.app, ["-v", "http://h/v"])

        assert result.exit_code == 0, result.output
        out = result.stdout_bytes.decode()
        assert out.startswith("HTTP/1.1 GET http://h/v\n")
        assert out.endswith("\n\nhello")

    def test_head(self, server: FakeServer) -> None:
        """-I sends HEAD and prints the response headers."""
        server.content = b""
        server.headers = {"X-Served-By": "fake"}

        result = runner.invoke(cli.app, ["-I", "http://h/"])

        assert result.exit_code == 0, result.output
        assert server.requests[0].method == "HEAD"
        assert result.stdout_bytes.startswith(b"HTTP/1.1 200 OK\r\n")
        assert b"X-Served-By: fake\r\n" in result.stdout_bytes

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(cli.app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Failure Paths
# =============================================================================


class TestCliErrors:
    """Fatal errors exit non-zero with a message."""

    def test_missing_url(self, server: FakeServer) -> None:
        """No URL is reported before any request."""
        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1
        assert "no URL specified" in result.output
        assert server.requests == []

    def test_bad_size(self, server: FakeServer) -> None:
        """Malformed sizes are reported before any request."""
        result = runner.invoke(cli.app, ["--max-filesize", "abcK", "http://h/"])

        assert result.exit_code == 1
        assert "invalid size" in result.output
        assert server.requests == []

    def test_missing_data_file(self, server: FakeServer, in_tmp: Path) -> None:
        """An unreadable @file aborts."""
        result = runner.invoke(cli.app, ["-d", "@missing.json", "http://h/"])

        assert result.exit_code == 1
        assert "missing.json" in result.output
        assert server.requests == []

    def test_unwritable_output(self, server: FakeServer, in_tmp: Path) -> None:
        """An output path in a missing directory aborts."""
        result = runner.invoke(cli.app, ["-o", "no/such/dir/out.txt", "http://h/"])

        assert result.exit_code == 1
        assert "cannot open" in result.output

    def test_network_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Connection errors abort."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        monkeypatch.setattr(
            cli,
            "HttpClient",
            lambda **kwargs: HttpClient(transport=httpx.MockTransport(refuse), **kwargs),
        )

        result = runner.invoke(cli.app, ["http://h/"])

        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_unknown_flag(self) -> None:
        """Unknown flags are usage errors."""
        result = runner.invoke(cli.app, ["--cookie", "a=b", "http://h/"])

        assert result.exit_code == 2
