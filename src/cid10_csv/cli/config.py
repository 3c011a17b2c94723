from __future__ import annotations

import os
from pathlib import Path

from cid10_csv.parsing.registry import TABLE_FILES

DEFAULT_LOG_LEVEL = "WARN"


def get_data_dir() -> Path | None:
    """Directory holding the DATASUS table files, from `CID10_PATH`."""
    value = os.getenv("CID10_PATH")
    return Path(value) if value else None


def get_chunk_size() -> int | None:
    """Read size in bytes from `CID10_CHUNK_SIZE`; `None` keeps the reader default."""
    value = os.getenv("CID10_CHUNK_SIZE")
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"CID10_CHUNK_SIZE must be an integer, got {value!r}")


def get_log_level() -> str:
    return os.getenv("CID10_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def resolve_input_path(table_name: str, input_path: str | None) -> Path:
    """
    Returns the file to read for `table_name`.

    - An explicit `input_path` always wins.
    - Otherwise the DATASUS file name is looked up under `CID10_PATH`.
    """
    if input_path:
        return Path(input_path)
    data_dir = get_data_dir()
    if data_dir is None:
        raise ValueError("no --input given and CID10_PATH is not set")
    return data_dir / TABLE_FILES[table_name]
