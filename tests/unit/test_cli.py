from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from cid10_csv.cli.main import main

CHAPTERS = [
    "NUMCAP;CATINIC;CATFIM;DESCRICAO;DESCRABREV",
    "1;A00;B99;Capítulo I - Algumas doenças infecciosas;I.   Algumas doenças infecciosas",
    "2;C00;D48;Capítulo II - Neoplasias [tumores];II.  Neoplasias [tumores]",
]


@pytest.fixture
def chapters_file(write_table: Callable[..., Path]) -> Path:
    return write_table("CID-10-CAPITULOS.CSV", CHAPTERS)


def test_cli_help_prints_and_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI is accessible."""
    # Argparse exits via SystemExit for -h
    with pytest.raises(SystemExit) as e:
        main(["-h"])

    assert e.value.code == 0
    out = capsys.readouterr().out
    assert "usage: cid10" in out
    assert "dump" in out
    assert "count" in out


def test_cli_tables_lists_file_names(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["tables"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "chapters\tCID-10-CAPITULOS.CSV" in out
    assert "morphology_categories\tCID-O-CATEGORIAS.CSV" in out


def test_cli_dump_prints_json_lines(chapters_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """One JSON object per row, accents kept readable."""
    rc = main(["dump", "--table", "chapters", "--input", str(chapters_file), "--chunk-size", "5"])
    assert rc == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["number"] == 1
    assert first["roman"] == "I"
    assert first["description"] == "Algumas doenças infecciosas"
    assert "doenças" in lines[0]


def test_cli_dump_raw_and_limit(chapters_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """`--raw` prints field arrays, `--limit` stops early."""
    rc = main(["dump", "--table", "chapters", "--input", str(chapters_file), "--raw", "--limit", "1"])
    assert rc == 0

    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])[:3] == ["1", "A00", "B99"]
    assert captured.err.strip() == f"chapters: rows=1 input={chapters_file} (stopped early)"


def test_cli_dump_limit_never_parses_rows_past_it(
    write_table: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    """A malformed row right after the limit is never reached."""
    path = write_table("LIMIT.CSV", [CHAPTERS[0], CHAPTERS[1], "BAD;C00;D48;d;a"])
    rc = main(["dump", "--table", "chapters", "--input", str(path), "--limit", "1"])
    assert rc == 0

    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 1
    assert "invalid int" not in captured.err


def test_cli_dump_under_limit_prints_no_summary(chapters_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["dump", "--table", "chapters", "--input", str(chapters_file), "--limit", "5"])
    assert rc == 0

    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 2
    assert "stopped early" not in captured.err


def test_cli_count_uses_cid10_path(
    chapters_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Without `--input`, the file is looked up under `CID10_PATH`."""
    monkeypatch.setenv("CID10_PATH", str(chapters_file.parent))
    monkeypatch.setenv("CID10_CHUNK_SIZE", "3")

    rc = main(["count", "--table", "chapters"])
    assert rc == 0
    out = capsys.readouterr().out.strip()
    assert out == f"chapters: rows=2 input={chapters_file}"


def test_cli_missing_file_exits_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["count", "--table", "groups", "--input", str(tmp_path / "missing.CSV")])
    assert rc == 1
    assert "cannot read" in capsys.readouterr().err


def test_cli_parse_error_exits_one(write_table: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
    """A malformed row stops the read with a message naming the field."""
    path = write_table("BAD.CSV", ["NUMCAP;CATINIC;CATFIM;DESCRICAO;DESCRABREV", "X;A00;B99;d;a"])
    rc = main(["dump", "--table", "chapters", "--input", str(path)])
    assert rc == 1
    assert "number" in capsys.readouterr().err


def test_cli_requires_input_or_cid10_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CID10_PATH", raising=False)
    with pytest.raises(SystemExit) as e:
        main(["count", "--table", "chapters"])
    assert e.value.code == 2


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit) as e:
        main(["--log-level", "LOUD", "tables"])
    assert e.value.code == 2
