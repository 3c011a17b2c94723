from __future__ import annotations

from dataclasses import dataclass, field

from cid10_csv.parsing.primitives import parse_optional_text, split_code_list, strip_category_code
from cid10_csv.parsing.schema import FieldSpec, RowParser
from cid10_csv.parsing.types import RawRow


@dataclass(frozen=True, slots=True)
class Category:
    """
    A CID-10 category (three character code), from `CID-10-CATEGORIAS.CSV`.

    `classif` is the dagger/asterisk dual classification marker:
    - `None`: no dual classification,
    - `"+"`: classified by etiology,
    - `"*"`: classified by manifestation.

    `refer` is the code under the other classification, when the file gives one.
    `excluded` lists excluded codes now folded into this category.
    """
    code: str
    classif: str | None
    description: str
    abbreviation: str
    refer: str | None
    excluded: list[str] = field(default_factory=list)


# column indices: CAT;CLASSIF;DESCRICAO;DESCRABREV;REFER;EXCLUIDOS
CODE = 0
CLASSIF = 1
DESCRIPTION = 2
ABBREVIATION = 3
REFER = 4
EXCLUDED = 5

CATEGORY_PARSER: RowParser[Category] = RowParser(
    row_type=Category,
    fields=[
        FieldSpec("code", CODE),
        FieldSpec("classif", CLASSIF, parse_optional_text),
        FieldSpec("description", DESCRIPTION),
        FieldSpec("abbreviation", ABBREVIATION, strip_category_code),   # drops "A00   "
        FieldSpec("refer", REFER, parse_optional_text, required=False),
        FieldSpec("excluded", EXCLUDED, split_code_list, required=False),
    ],
)


def parse_category_row(raw: RawRow) -> Category:
    """Parse a single category's row."""
    return CATEGORY_PARSER.parse(raw)
