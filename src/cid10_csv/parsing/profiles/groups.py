from __future__ import annotations

from dataclasses import dataclass

from cid10_csv.parsing.schema import FieldSpec, RowParser
from cid10_csv.parsing.types import RawRow


@dataclass(frozen=True, slots=True)
class Group:
    """A CID-10 group of categories, from `CID-10-GRUPOS.CSV`."""
    cat_first: str
    cat_last: str
    description: str
    abbreviation: str       # up to 50 chars


# column indices: CATINIC;CATFIM;DESCRICAO;DESCRABREV
CAT_FIRST = 0
CAT_LAST = 1
DESCRIPTION = 2
ABBREVIATION = 3

GROUP_PARSER: RowParser[Group] = RowParser(
    row_type=Group,
    fields=[
        FieldSpec("cat_first", CAT_FIRST),
        FieldSpec("cat_last", CAT_LAST),
        FieldSpec("description", DESCRIPTION),
        FieldSpec("abbreviation", ABBREVIATION),
    ],
)


def parse_group_row(raw: RawRow) -> Group:
    return GROUP_PARSER.parse(raw)
