from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Iterator, Sequence

import pytest

from cid10_csv.ingest.assembler import ENCODING, TERMINATOR


def _find_repo_root(start: Path) -> Path:
    marker = "pyproject.toml"
    cur = start.resolve()
    for p in (cur, *cur.parents):
        if(p / marker).exists():
            return p
    raise RuntimeError(f"Could not find repo root from: {start}")


@pytest.fixture(scope="session")
def repo_root() -> Path:
    """The absolute path to the repo root (finds by walking up to `pyproject.toml`)."""
    return _find_repo_root(Path(__file__))


class ListChunkSource:
    """
    In-memory chunk source. Hands out `chunks` one per step, yielding to the loop
    between them, and can fail with `error` once `fail_after` chunks went out.
    """

    def __init__(
        self,
        chunks: Sequence[str],
        *,
        fail_after: int | None = None,
        error: BaseException | None = None,
    ) -> None:
        self._chunks = list(chunks)
        self.fail_after = fail_after
        self.error = error if error is not None else OSError("disk went away")
        self.opened = 0
        self.closed = 0
        self.served = 0

    async def chunks(self) -> AsyncIterator[str]:
        self.opened += 1
        try:
            if self.fail_after == 0:
                raise self.error
            for chunk in self._chunks:
                yield chunk
                self.served += 1
                await asyncio.sleep(0)
                if self.fail_after == self.served:
                    raise self.error
        finally:
            self.closed += 1

    def __repr__(self) -> str:
        return f"ListChunkSource({len(self._chunks)} chunks)"


@pytest.fixture
def chunk_source() -> type[ListChunkSource]:
    """Factory for in-memory chunk sources."""
    return ListChunkSource


async def _drain(rows: AsyncIterator[Any]) -> list[Any]:
    return [row async for row in rows]


@pytest.fixture
def collect() -> Callable[[AsyncIterator[Any]], list[Any]]:
    """Runs a row stream to its end on a fresh event loop and returns every row."""
    def run(rows: AsyncIterator[Any]) -> list[Any]:
        return asyncio.run(_drain(rows))
    return run


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[..., Path]:
    """
    Writes a DATASUS style table file: every line ends with `;\\r\\n`, latin-1 encoded.
    `terminate_last=False` leaves the last line without its terminator.
    """
    def write(name: str, lines: Sequence[str], *, terminate_last: bool = True) -> Path:
        text = TERMINATOR.join(lines)
        if lines and terminate_last:
            text += TERMINATOR
        path = tmp_path / name
        path.write_bytes(text.encode(ENCODING))
        return path
    return write


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    """The CLI binds a handler to the (captured) stderr of its test; drop it afterwards."""
    yield
    logger = logging.getLogger("cid10_csv")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
