from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing
from pathlib import Path
from typing import Any, AsyncIterator

from cid10_csv.ingest.assembler import FIELD_SEPARATOR, LineAssembler
from cid10_csv.ingest.batch_queue import QueueDrained, RowBatchQueue
from cid10_csv.ingest.source import ChunkSource, FileChunkSource, SourceError
from cid10_csv.parsing.types import RawRow, RowParserFn, keep_raw

logger = logging.getLogger(__name__)

DEFAULT_MAX_PENDING = 64    # batches buffered ahead of a slow consumer before reads pause


def split_fields(line: str) -> RawRow:
    """Split one unterminated line on the bare field separator."""
    return line.split(FIELD_SEPARATOR)


async def _pump(source: ChunkSource, assembler: LineAssembler, queue: RowBatchQueue) -> None:
    """
    Producer: drives `source` to its end, pushing every completed batch.

    Ends with exactly one of `queue.finish()` or `queue.fail()`.
    """
    try:
        async with aclosing(source.chunks()) as chunks:
            async for chunk in chunks:
                batch = assembler.feed(chunk)
                if batch is not None:
                    await queue.put(batch)
    except Exception as exc:
        logger.warning("reading %r failed: %s", source, exc)
        if isinstance(exc, SourceError):
            queue.fail(exc)
        else:
            err = SourceError(f"reading {source!r} failed: {exc}")
            err.__cause__ = exc
            queue.fail(err)
        return

    assembler.finish()
    queue.finish()


async def iter_table_rows(
    source: ChunkSource,
    parser: RowParserFn[Any] | None = None,
    *,
    max_pending: int = DEFAULT_MAX_PENDING,
) -> AsyncIterator[Any]:
    """
    Lazily yield one parsed row per complete line of a table source.

    - The first line of the stream is the table header and is never yielded.
    - `parser` receives a `RawRow` per remaining line. Defaults to returning the raw fields.
    - A last line lacking its terminator is dropped.
    - A source failure is raised once, after every row from batches read before it.
    - Parser exceptions propagate immediately and end the stream.

    Everything (assembler, queue, producer task) belongs to this one call. Use
    `contextlib.aclosing` or `aclose()` to stop early: the producer is cancelled
    and the source closed before `aclose()` returns.
    """
    convert = keep_raw if parser is None else parser
    assembler = LineAssembler()
    queue = RowBatchQueue(max_pending)
    producer = asyncio.create_task(_pump(source, assembler, queue))
    header = True

    try:
        while True:
            try:
                batch = await queue.get()
            except QueueDrained:
                break

            for line in batch:
                if header:
                    header = False
                    continue
                yield convert(split_fields(line))

        # a failure is never dropped, even one recorded after the last batch
        if queue.error is not None:
            raise queue.error
    finally:
        if not producer.done():
            logger.debug("closing %r before its end", source)
            producer.cancel()
        await asyncio.wait([producer])


def stream_table(
    path: str | Path,
    parser: RowParserFn[Any] | None = None,
    *,
    chunk_size: int | None = None,
    max_pending: int = DEFAULT_MAX_PENDING,
) -> AsyncIterator[Any]:
    """
    Entry point: lazily read the table file at `path`.

    `chunk_size` is the read size in bytes, see `FileChunkSource`.
    Every call returns a fresh, independent sequence over the file.
    """
    return iter_table_rows(FileChunkSource(path, chunk_size), parser, max_pending=max_pending)
