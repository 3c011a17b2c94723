from __future__ import annotations

import argparse
import logging
import sys

from cid10_csv.cli.config import get_chunk_size, get_log_level, resolve_input_path
from cid10_csv.cli.loader import read_file
from cid10_csv.cli.logs import configure_logging
from cid10_csv.ingest.source import SourceError
from cid10_csv.parsing.primitives import ParseError
from cid10_csv.parsing.registry import TABLE_FILES, TABLE_NAMES

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def main(argv: list[str] | None = None) -> int:
    """
    A CLI for reading the DATASUS CID-10 / CID-O table files.

    The `cmd` options are:
    ## tables:
    Lists the known tables and the DATASUS file each one is read from.

    ## dump:
    Prints one JSON document per row.
    - `--table` as the table layout to parse with,
    - `--input` as the path to the file (defaults to `$CID10_PATH/<file name>`),
    - `--limit` to stop after that many rows (a summary line then goes to stderr),
    - `--raw` to print the split fields instead of parsed rows.

    ## count:
    Reads the whole file and prints a one line summary.

    ### Example usage:
    - `cid10 dump --table chapters --input data/CID-10-CAPITULOS.CSV`
    - `CID10_PATH=data cid10 count --table subcategories`
    """
    p = argparse.ArgumentParser(prog="cid10")
    p.add_argument("--log-level", default=None, help="ERROR|WARN|INFO|DEBUG (default: $CID10_LOG_LEVEL or WARN).")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("tables", help="List known tables and their file names.")

    # dump / count share the input options
    for name, help_text in (("dump", "Print the rows of a table file as JSON lines."),
                            ("count", "Count the rows of a table file.")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--table", required=True, choices=TABLE_NAMES)
        cmd.add_argument("--input", default=None, help="Path to the table file (default: $CID10_PATH/<file name>).")
        cmd.add_argument("--chunk-size", type=_positive_int, default=None, help="Bytes per read (default: $CID10_CHUNK_SIZE or 64 KiB).")
        if name == "dump":
            cmd.add_argument("--limit", type=_positive_int, default=None, help="Stop after this many rows.")
            cmd.add_argument("--raw", action="store_true", help="Print split fields instead of parsed rows.")

    args = p.parse_args(argv)

    try:
        configure_logging(args.log_level or get_log_level())
    except ValueError as e:
        p.error(str(e))

    if args.cmd == "tables":
        for table_name in TABLE_NAMES:
            print(f"{table_name}\t{TABLE_FILES[table_name]}")
        return 0

    try:
        input_path = resolve_input_path(args.table, args.input)
        chunk_size = args.chunk_size or get_chunk_size()
    except ValueError as e:
        p.error(str(e))

    try:
        if args.cmd == "dump":
            summary = read_file(
                input_path=input_path,
                table_name=args.table,
                chunk_size=chunk_size,
                limit=args.limit,
                raw=args.raw,
                out=sys.stdout,
            )
            # stdout holds only rows
            if not summary.complete:
                print(summary.render_one_line(), file=sys.stderr)
            return 0

        if args.cmd == "count":
            summary = read_file(input_path=input_path, table_name=args.table, chunk_size=chunk_size)
            print(summary.render_one_line())
            return 0

    except SourceError as e:
        cause = e.__cause__ or e
        logger.error("read failed: %s", cause)
        print(f"error: cannot read {input_path}: {cause}", file=sys.stderr)
        return 1
    except ParseError as e:
        logger.error("parse failed: %s", e.detail)
        print(f"error: {input_path}: {e.detail}", file=sys.stderr)
        return 1

    return 2
