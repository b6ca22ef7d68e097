"""Run with ``python -m minicurl``."""

from minicurl.cli import app

app(prog_name="minicurl")
