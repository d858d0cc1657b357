"""
Caller-owned byte streams for ``logs`` and ``export``.

A ByteStream wraps an httpx response whose body has not been read yet. The
library never buffers, times out or closes it on the caller's behalf.
Closing it early drops the connection, which is how a followed log stream
or a running export is cancelled on the daemon side.

Examples:
    >>> async with await client.containers.logs("web", stdout=True) as logs:
    ...     async for chunk in logs:
    ...         handle(chunk)
"""

from collections.abc import AsyncIterator

import httpx


class ByteStream:
    """Async iterator over the raw body of a streamed daemon response."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def closed(self) -> bool:
        return self._response.is_closed

    def iter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        """Yield body chunks as they arrive."""
        return self._response.aiter_bytes(chunk_size)

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.iter_bytes()

    async def read(self) -> bytes:
        """Read the remaining body and close the stream."""
        try:
            return await self._response.aread()
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        """Close the connection; safe to call more than once."""
        await self._response.aclose()

    async def __aenter__(self) -> "ByteStream":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False
