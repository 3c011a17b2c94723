from __future__ import annotations

import asyncio
from collections import deque

from cid10_csv.ingest.assembler import RowBatch


class QueueDrained(Exception):
    """Source ended and every batch was handed out. Internal: never reaches callers."""


class RowBatchQueue:
    """
    FIFO of `RowBatch` values between one producer (the chunk pump) and one consumer
    (the table stream). Also holds the stream state: `ended` and `error`.

    `get()` order of checks:
    - a queued batch is returned first. Nothing is queued after a failure, so these
      are always batches produced before it,
    - then a stored error is raised,
    - then an ended source raises `QueueDrained`,
    - otherwise the consumer waits on an event until the producer signals.

    `maxsize > 0` bounds the FIFO: `put()` suspends the producer until the consumer
    takes a batch. `maxsize=0` lets it grow without limit.
    """

    def __init__(self, maxsize: int = 0) -> None:
        if maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize!r}")
        self.maxsize = maxsize
        self.ended = False
        self.error: BaseException | None = None
        self._pending: deque[RowBatch] = deque()
        self._readable = asyncio.Event()
        self._writable = asyncio.Event()

    def __len__(self) -> int:
        return len(self._pending)

    def full(self) -> bool:
        return self.maxsize > 0 and len(self._pending) >= self.maxsize

    async def put(self, batch: RowBatch) -> None:
        while self.full():
            self._writable.clear()
            await self._writable.wait()
        self._pending.append(batch)
        self._readable.set()

    def finish(self) -> None:
        self.ended = True
        self._readable.set()

    def fail(self, error: BaseException) -> None:
        self.error = error
        self._readable.set()

    async def get(self) -> RowBatch:
        while True:
            # batches queued before a failure go out first; nothing is queued after one
            if self._pending:
                batch = self._pending.popleft()
                self._writable.set()
                return batch
            if self.error is not None:
                raise self.error
            if self.ended:
                raise QueueDrained()
            self._readable.clear()
            await self._readable.wait()
