"""Streaming adapters over encrypt/decrypt contexts.

All adapters drive the same update()/finalize() calls as the one-shot API
and produce byte-identical output for any chunking of the input.

When decrypting, chunks yielded before the end of the stream are
unauthenticated. Treat them as provisional until the adapter completes
without raising.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from typing import IO, Any

from .constants import DEFAULT_CHUNK_SIZE
from .crypto.cipher import CipherContext, Encryptor
from .crypto.utils import BytesLike
from .errors import InvalidStateError
from .types import StreamConfig

logger = logging.getLogger("cbchmac")

# Type alias for tag callbacks
TagCallback = Callable[[bytes], Any]


def iter_file(fileobj: IO[bytes], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Read a binary file-like object in chunks until EOF."""
    while True:
        chunk = fileobj.read(chunk_size)
        if not chunk:
            return
        yield chunk


def transform(ctx: CipherContext, chunks: Iterable[BytesLike]) -> Iterator[bytes]:
    """Push chunks through a context, yielding output as it becomes available.

    The context is finalized once the input is exhausted; its output is the
    last chunk yielded. Empty outputs are skipped.

    Args:
        ctx: A fresh Encryptor or Decryptor (AAD and tag already set).
        chunks: The input chunks.

    Yields:
        Output chunks.
    """
    for chunk in chunks:
        out = ctx.update(chunk)
        if out:
            yield out
    tail = ctx.finalize()
    if tail:
        yield tail


async def atransform(
    ctx: CipherContext,
    chunks: AsyncIterable[BytesLike] | Iterable[BytesLike],
) -> AsyncIterator[bytes]:
    """Async variant of transform().

    Input is pulled only as fast as the consumer iterates.
    """
    if isinstance(chunks, AsyncIterable):
        async for chunk in chunks:
            out = ctx.update(chunk)
            if out:
                yield out
    else:
        for chunk in chunks:
            out = ctx.update(chunk)
            if out:
                yield out
    tail = ctx.finalize()
    if tail:
        yield tail


class _EndOfStream:
    pass


_END = _EndOfStream()


class CipherStream:
    """Push-style adapter with a bounded output buffer.

    The producer calls ``await write(chunk)`` and finally ``await close()``;
    the consumer iterates with ``async for``. write() and close() block while
    ``config.max_pending`` output chunks are waiting to be consumed.

    A failure in write() or close() is raised to the producer at once, even
    with the buffer full, and to the consumer after any output already queued.

    Example:
        ```python
        stream = CipherStream(cipher, on_tag=tags.append)

        async def produce():
            for chunk in chunks:
                await stream.write(chunk)
            await stream.close()

        async def consume():
            return b"".join([chunk async for chunk in stream])
        ```
    """

    def __init__(
        self,
        ctx: CipherContext,
        config: StreamConfig | None = None,
        on_tag: TagCallback | None = None,
    ) -> None:
        self._ctx = ctx
        self._config = config or StreamConfig()
        self._on_tag = on_tag
        # Unbounded so the end marker never blocks; data is bounded by _slots
        self._queue: asyncio.Queue[bytes | _EndOfStream] = asyncio.Queue()
        self._slots = asyncio.Semaphore(self._config.max_pending)
        self._closed = False
        self._done = False
        self._error: BaseException | None = None

    @property
    def closed(self) -> bool:
        return self._closed

    async def write(self, chunk: BytesLike) -> None:
        """Process a chunk and queue its output.

        Raises:
            InvalidStateError: If the stream is closed.
        """
        if self._closed:
            raise InvalidStateError("Stream is closed")
        try:
            out = self._ctx.update(chunk)
        except Exception as e:
            self._abort(e)
            raise
        if out:
            await self._emit(out)

    async def close(self) -> None:
        """Finalize the context and end the stream.

        Raises:
            InvalidStateError: If the stream is already closed.
            AuthenticationFailedError: When decrypting, if the tag does not match.
        """
        if self._closed:
            raise InvalidStateError("Stream is already closed")
        self._closed = True
        try:
            tail = self._ctx.finalize()
            if tail:
                await self._emit(tail)
            if self._on_tag is not None and isinstance(self._ctx, Encryptor):
                self._on_tag(self._ctx.get_auth_tag())
        except Exception as e:
            logger.debug("Stream failed at close: %s", e)
            self._error = e
            raise
        finally:
            self._queue.put_nowait(_END)

    async def _emit(self, chunk: bytes) -> None:
        await self._slots.acquire()
        self._queue.put_nowait(chunk)

    def _abort(self, error: BaseException) -> None:
        logger.debug("Stream aborted: %s", error)
        self._error = error
        self._closed = True
        self._queue.put_nowait(_END)

    def __aiter__(self) -> CipherStream:
        return self

    async def __anext__(self) -> bytes:
        if not self._done:
            item = await self._queue.get()
            if not isinstance(item, _EndOfStream):
                self._slots.release()
                return item
            self._done = True
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration
