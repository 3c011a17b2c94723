from __future__ import annotations

from dataclasses import dataclass

from cid10_csv.parsing.primitives import parse_int, roman_prefix, strip_chapter_title, strip_roman_prefix
from cid10_csv.parsing.schema import FieldSpec, RowParser
from cid10_csv.parsing.types import RawRow


@dataclass(frozen=True, slots=True)
class Chapter:
    """
    A CID-10 chapter, from `CID-10-CAPITULOS.CSV`.

    `number` is arabic; chapter 0 holds the codes not officially part of CID-10.
    `roman` has no column of its own, it is read off the abbreviation prefix.
    """
    number: int
    roman: str | None
    cat_first: str
    cat_last: str
    description: str
    abbreviation: str


# column indices: NUMCAP;CATINIC;CATFIM;DESCRICAO;DESCRABREV
NUMBER = 0
CAT_FIRST = 1
CAT_LAST = 2
DESCRIPTION = 3
ABBREVIATION = 4

CHAPTER_PARSER: RowParser[Chapter] = RowParser(
    row_type=Chapter,
    fields=[
        FieldSpec("number", NUMBER, lambda v: parse_int(v, field="number")),
        FieldSpec("roman", ABBREVIATION, roman_prefix),
        FieldSpec("cat_first", CAT_FIRST),
        FieldSpec("cat_last", CAT_LAST),
        FieldSpec("description", DESCRIPTION, strip_chapter_title),     # drops "Capítulo IV - "
        FieldSpec("abbreviation", ABBREVIATION, strip_roman_prefix),    # drops "IV.  "
    ],
)


def parse_chapter_row(raw: RawRow) -> Chapter:
    """Parse a single chapter's row."""
    return CHAPTER_PARSER.parse(raw)
