"""
Tests for caller-owned byte streams.
"""

import httpx
import pytest

from docker_engine_api.core.streams import ByteStream


class ChunkedBody(httpx.AsyncByteStream):
    """Response body that yields fixed chunks and records when it is closed."""

    def __init__(self, chunks: list[bytes]):
        self.chunks = chunks
        self.yielded = 0
        self.closed = False

    async def __aiter__(self):
        for chunk in self.chunks:
            self.yielded += 1
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def chunked_body() -> ChunkedBody:
    return ChunkedBody([b"first\n", b"second\n", b"third\n"])


@pytest.fixture
def streaming_daemon(fake_daemon, chunked_body):
    fake_daemon.use(lambda request: httpx.Response(200, stream=chunked_body))
    return fake_daemon


class TestByteStream:
    """Test reading and cancelling streamed bodies."""

    @pytest.mark.asyncio
    async def test_iterates_chunks_in_order(self, streaming_daemon, containers):
        stream = await containers.logs("web", follow=True, stdout=True)

        chunks = [chunk async for chunk in stream]
        await stream.aclose()

        assert b"".join(chunks) == b"first\nsecond\nthird\n"
        assert streaming_daemon.last_request.url.params["follow"] == "true"

    @pytest.mark.asyncio
    async def test_body_is_not_read_before_iteration(
        self, streaming_daemon, chunked_body, containers
    ):
        stream = await containers.logs("web", follow=True)

        assert chunked_body.yielded == 0
        assert stream.status_code == 200
        assert not stream.closed
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_closing_early_cancels_transfer(
        self, streaming_daemon, chunked_body, containers
    ):
        """Leaving the context after one chunk should close the connection."""
        async with await containers.logs("web", follow=True) as stream:
            async for chunk in stream.iter_bytes():
                assert chunk == b"first\n"
                break

        assert stream.closed
        assert chunked_body.closed
        assert chunked_body.yielded == 1

    @pytest.mark.asyncio
    async def test_read_collects_body_and_closes(
        self, streaming_daemon, chunked_body, containers
    ):
        stream = await containers.backup("web")

        body = await stream.read()

        assert body == b"first\nsecond\nthird\n"
        assert stream.closed
        assert chunked_body.closed

    @pytest.mark.asyncio
    async def test_aclose_twice_is_safe(self, streaming_daemon, containers):
        stream = await containers.backup("web")

        await stream.aclose()
        await stream.aclose()

        assert stream.closed

    @pytest.mark.asyncio
    async def test_headers_are_exposed(self, fake_daemon, containers):
        fake_daemon.respond(
            200,
            content=b"tar",
            headers={"Content-Type": "application/x-tar"},
        )

        async with await containers.backup("web") as stream:
            assert stream.headers["Content-Type"] == "application/x-tar"
