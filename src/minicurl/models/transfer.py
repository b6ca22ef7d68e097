"""Transfer counters for the response copy loop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TransferStats:
    """Running totals for one response body copy.

    Attributes:
        total: Bytes written to the output so far
        chunks: Number of writes performed
        truncated: True when the download cap cut bytes from the body
    """

    total: int = 0
    chunks: int = 0
    truncated: bool = False

    def record(self, count: int) -> None:
        """Account for ``count`` bytes written."""
        self.total += count
        self.chunks += 1

    def __str__(self) -> str:
        suffix = " (truncated)" if self.truncated else ""
        return f"{self.total:,} bytes in {self.chunks} chunks{suffix}"


__all__ = ["TransferStats"]
