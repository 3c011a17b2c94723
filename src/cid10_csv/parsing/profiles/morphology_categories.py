from __future__ import annotations

from dataclasses import dataclass

from cid10_csv.parsing.primitives import parse_optional_text
from cid10_csv.parsing.schema import FieldSpec, RowParser
from cid10_csv.parsing.types import RawRow


@dataclass(frozen=True, slots=True)
class MorphologyCategory:
    """A neoplasm morphology (CID-O) category such as `M8000/0`, from `CID-O-CATEGORIAS.CSV`."""
    code: str
    description: str
    refer: str | None       # reference into CID-10 chapter II, when given


# column indices: CAT;DESCRICAO;REFER
CODE = 0
DESCRIPTION = 1
REFER = 2

MORPHOLOGY_CATEGORY_PARSER: RowParser[MorphologyCategory] = RowParser(
    row_type=MorphologyCategory,
    fields=[
        FieldSpec("code", CODE),
        FieldSpec("description", DESCRIPTION),
        FieldSpec("refer", REFER, parse_optional_text, required=False),
    ],
)


def parse_morphology_category_row(raw: RawRow) -> MorphologyCategory:
    """Parse a single morphology category's row."""
    return MORPHOLOGY_CATEGORY_PARSER.parse(raw)
