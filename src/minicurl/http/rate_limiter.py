"""Token bucket throttling for request bodies.

The bucket refills at ``rate`` bytes per second up to ``capacity``. Taking
more bytes than are available drives the bucket negative and the caller
sleeps until the deficit has been refilled.

Example:
    >>> from minicurl.http.rate_limiter import TokenBucket, RateLimitedReader
    >>>
    >>> bucket = TokenBucket(rate=1024)  # 1 KiB/s, one second of burst
    >>> reader = RateLimitedReader(b"a=1&b=2", bucket, chunk_size=4)
    >>> list(reader)
    [b'a=1&', b'b=2']
"""

from __future__ import annotations

import io
import time
from collections.abc import Callable, Iterator
from typing import BinaryIO


class TokenBucket:
    """Blocking token bucket rate limiter.

    A bucket belongs to one reader on one thread and is not locked.

    Attributes:
        rate: Tokens (bytes) added per second
        capacity: Maximum tokens held; defaults to one second's worth
    """

    def __init__(
        self,
        rate: float,
        capacity: float | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize a full bucket.

        Args:
            rate: Tokens per second, must be positive
            capacity: Bucket size (default: ``rate``)
            clock: Monotonic time source
            sleep: Blocking sleep used when tokens run out
        """
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self.rate = float(rate)
        self.capacity = float(capacity if capacity is not None else rate)
        self._clock = clock
        self._sleep = sleep
        self._tokens = self.capacity
        self._last_update = clock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_update
        self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)
        self._last_update = now

    def take(self, count: int) -> float:
        """Remove ``count`` tokens without blocking.

        Returns:
            Seconds the caller must wait before using the tokens
        """
        self._refill()
        self._tokens -= count
        if self._tokens >= 0:
            return 0.0
        return -self._tokens / self.rate

    def wait(self, count: int) -> float:
        """Remove ``count`` tokens, sleeping until they are available.

        Returns:
            Time waited in seconds
        """
        wait_time = self.take(count)
        if wait_time > 0:
            self._sleep(wait_time)
        return wait_time

    @property
    def available_tokens(self) -> float:
        """Current available tokens (approximate, may be negative)."""
        elapsed = self._clock() - self._last_update
        return min(self.capacity, self._tokens + elapsed * self.rate)


class RateLimitedReader:
    """Reader that releases bytes no faster than its bucket allows.

    Iterating yields chunks of at most ``chunk_size`` bytes, which is the
    form ``httpx`` accepts as streaming request content.
    """

    def __init__(self, source: bytes | BinaryIO, bucket: TokenBucket, chunk_size: int = 1024):
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._bucket = bucket
        self.chunk_size = chunk_size

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, then wait for the bucket."""
        data = self._source.read(size)
        if data:
            self._bucket.wait(len(data))
        return data

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(self.chunk_size)
            if not chunk:
                return
            yield chunk


__all__ = [
    "TokenBucket",
    "RateLimitedReader",
]
