from __future__ import annotations

from dataclasses import dataclass

from cid10_csv.parsing.primitives import parse_optional_text
from cid10_csv.parsing.schema import FieldSpec, RowParser
from cid10_csv.parsing.types import RawRow


@dataclass(frozen=True, slots=True)
class MorphologyGroup:
    """
    A group of neoplasm morphology (CID-O) categories, from `CID-O-GRUPOS.CSV`.

    `refer` points into CID-10 chapter II (Neoplasms), when given.
    """
    cat_first: str
    cat_last: str
    description: str
    refer: str | None


# column indices: CATINIC;CATFIM;DESCRICAO;REFER
CAT_FIRST = 0
CAT_LAST = 1
DESCRIPTION = 2
REFER = 3

MORPHOLOGY_GROUP_PARSER: RowParser[MorphologyGroup] = RowParser(
    row_type=MorphologyGroup,
    fields=[
        FieldSpec("cat_first", CAT_FIRST),
        FieldSpec("cat_last", CAT_LAST),
        FieldSpec("description", DESCRIPTION),
        FieldSpec("refer", REFER, parse_optional_text, required=False),
    ],
)


def parse_morphology_group_row(raw: RawRow) -> MorphologyGroup:
    return MORPHOLOGY_GROUP_PARSER.parse(raw)
