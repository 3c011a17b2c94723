from __future__ import annotations

import asyncio
import json
import logging
from contextlib import aclosing
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, TextIO

from cid10_csv.ingest.summary import ReadSummary
from cid10_csv.ingest.table_stream import stream_table
from cid10_csv.parsing.registry import TableSpec, get_table_spec

logger = logging.getLogger(__name__)


def render_row(row: Any) -> str:
    """
    One JSON document per row: row objects as objects, raw rows as arrays of fields.
    Non ASCII text (accents, `Capítulo`) is kept readable.
    """
    payload = asdict(row) if is_dataclass(row) else row
    return json.dumps(payload, ensure_ascii=False)


async def _read_rows(
    spec: TableSpec,
    input_path: Path,
    *,
    chunk_size: int | None,
    limit: int | None,
    raw: bool,
    out: TextIO | None,
) -> ReadSummary:
    """
    Consume the stream, writing rows to `out` when given.

    Stops once `limit` rows are out; rows past the limit are never parsed,
    and the summary is marked incomplete.
    """
    parser = None if raw else spec.parser
    rows = 0
    complete = True

    # aclosing: an early stop still closes the file before returning
    async with aclosing(stream_table(input_path, parser, chunk_size=chunk_size)) as stream:
        async for row in stream:
            if out is not None:
                out.write(render_row(row) + "\n")
            rows += 1
            # stop before asking the stream for a row past the limit
            if limit is not None and rows >= limit:
                complete = False
                break

    return ReadSummary(
        table_name=spec.table_name,
        input_path=str(input_path),
        rows=rows,
        complete=complete,
    )


def read_file(
    *,
    input_path: Path,
    table_name: str,
    chunk_size: int | None = None,
    limit: int | None = None,
    raw: bool = False,
    out: TextIO | None = None,
) -> ReadSummary:
    """
    Read a whole table file (or its first `limit` rows) with the table's parser.

    Raises on read failures (`SourceError`) and on unparseable rows (`ParseError`).
    """
    spec = get_table_spec(table_name)
    logger.info("reading %s as %s", input_path, spec.table_name)

    summary = asyncio.run(
        _read_rows(spec, input_path, chunk_size=chunk_size, limit=limit, raw=raw, out=out)
    )

    logger.info("read %d rows from %s", summary.rows, input_path)
    return summary
