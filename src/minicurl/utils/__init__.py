"""minicurl utilities."""

from minicurl.utils.sizes import MULTIPLIERS, parse_size

__all__ = [
    "MULTIPLIERS",
    "parse_size",
]
