from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import AsyncGenerator, Protocol

from cid10_csv.ingest.assembler import ENCODING

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024      # bytes per read


class SourceError(Exception):
    """I/O failure while reading a table source. The original error is chained as `__cause__`."""


class ChunkSource(Protocol):
    """
    Anything able to emit ordered chunks of decoded text.

    Normal exhaustion of `chunks()` is the end signal, an exception is the error signal.
    Closing the generator must release the underlying resource.
    """
    def chunks(self) -> AsyncGenerator[str, None]: ...


class FileChunkSource:
    """
    Reads a table file in fixed size binary chunks and decodes each one as `latin-1`.

    Blocking reads are pushed to a worker thread so the event loop keeps running
    while the disk is busy. The file is opened lazily, on the first `chunks()` step,
    and closed on end, failure or cancellation.
    """

    def __init__(self, path: str | Path, chunk_size: int | None = None) -> None:
        size = DEFAULT_CHUNK_SIZE if chunk_size is None else int(chunk_size)
        if size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size!r}")
        self.path = Path(path)
        self.chunk_size = size

    async def chunks(self) -> AsyncGenerator[str, None]:
        fh = await asyncio.to_thread(self.path.open, "rb")
        logger.debug("opened %s (chunk_size=%d)", self.path, self.chunk_size)
        try:
            while True:
                # cancelled mid read: the worker thread finishes its read, and close() below waits for it
                data = await asyncio.to_thread(fh.read, self.chunk_size)
                if not data:
                    break
                # single byte charset: every chunk decodes on its own
                yield data.decode(ENCODING)
        finally:
            fh.close()
            logger.debug("closed %s", self.path)

    def __repr__(self) -> str:
        return f"FileChunkSource(path={str(self.path)!r}, chunk_size={self.chunk_size})"
