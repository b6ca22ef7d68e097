"""CLI entry point."""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError
from rich.console import Console

from minicurl import __version__
from minicurl.core.arguments import build_config
from minicurl.core.config import Settings, get_settings
from minicurl.core.exceptions import MiniCurlError
from minicurl.core.logging import configure_logging
from minicurl.http.client import HttpClient
from minicurl.http.transfer import download
from minicurl.models.request import RequestConfig
from minicurl.models.transfer import TransferStats

app = typer.Typer(
    name="minicurl",
    help="Transfer a URL with a single HTTP request",
    add_completion=False,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

logger = logging.getLogger(__name__)


def perform(config: RequestConfig, settings: Settings) -> TransferStats:
    """Send the request described by ``config`` and write its response."""
    client = HttpClient(
        user_agent=settings.user_agent,
        timeout=settings.timeout,
        follow_redirects=settings.follow_redirects,
        chunk_size=settings.buffer_size,
    )
    echo = sys.stdout if config.verbose >= 1 else None
    with client:
        with client.stream(config, echo=echo) as response:
            return download(response, config, chunk_size=settings.buffer_size)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"minicurl {__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: str | None = typer.Argument(None, help="URL to transfer; http:// is assumed"),
    data: str | None = typer.Option(
        None, "-d", "--data", metavar="DATA", help="HTTP POST data, @FILE reads it from FILE"
    ),
    get: bool = typer.Option(False, "-G", "--get", help="Send -d DATA with HTTP GET"),
    output: str | None = typer.Option(
        None, "-o", "--output", metavar="FILE", help="Write to FILE instead of stdout"
    ),
    remote_name: bool = typer.Option(
        False, "-O", "--remote-name", help="Write output to a file named as the remote file"
    ),
    request: str | None = typer.Option(
        None, "-X", "--request", metavar="COMMAND", help="Specify request command to use"
    ),
    header: list[str] | None = typer.Option(
        None, "-H", "--header", metavar="LINE", help="Pass custom header LINE to server"
    ),
    head: bool = typer.Option(False, "-I", "--head", help="Show document info only"),
    limit_rate: str | None = typer.Option(
        None, "--limit-rate", metavar="RATE", help="Limit upload speed to RATE (e.g. 100K)"
    ),
    max_filesize: str | None = typer.Option(
        None, "--max-filesize", metavar="BYTES", help="Maximum filesize to download"
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose", count=True, help="Show the request; twice for debug logs"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Send one HTTP request and stream the response body."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"minicurl: invalid settings: {e}", markup=False)
        raise typer.Exit(code=1) from e

    configure_logging("DEBUG" if verbose >= 2 else settings.log_level)

    try:
        config = build_config(
            url,
            data=data,
            get=get,
            output=output,
            remote_name=remote_name,
            request=request,
            headers=header,
            head=head,
            limit_rate=limit_rate,
            max_filesize=max_filesize,
            verbose=verbose,
        )
        perform(config, settings)
    except MiniCurlError as e:
        logger.debug("aborting", exc_info=True)
        err_console.print(f"minicurl: {e}", markup=False)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
