#!/usr/bin/env python3
"""
minicurl Quickstart Example

Shows the library flow behind the command line: resolve flags into a
RequestConfig, send it once, and stream the response to stdout.

Usage:
    python examples/01_quickstart.py [URL]
"""

import sys

from minicurl import HttpClient, build_config, download


def main() -> None:
    """POST a small JSON document and print the echo."""
    url = sys.argv[1] if len(sys.argv) > 1 else "https://postman-echo.com/post"

    # Content-Type and Content-Length are inferred from the body
    config = build_config(url, data='{"hello": "world"}', verbose=1)

    with HttpClient() as client:
        with client.stream(config, echo=sys.stdout) as response:
            stats = download(response, config)

    print(f"\n✓ Status: {response.status_code}", file=sys.stderr)
    print(f"✓ Received: {stats}", file=sys.stderr)


if __name__ == "__main__":
    main()
