from __future__ import annotations

from dataclasses import dataclass, field

from cid10_csv.parsing.primitives import parse_optional_text, parse_raw_text, split_code_list, strip_subcategory_code
from cid10_csv.parsing.schema import FieldSpec, RowParser
from cid10_csv.parsing.types import RawRow


@dataclass(frozen=True, slots=True)
class Subcategory:
    """
    A CID-10 subcategory (four character code, no dot), from `CID-10-SUBCATEGORIAS.CSV`.

    Categories without subcategories are listed too, with a blank fourth character
    (`"A01 "`); `code` is kept exactly as read.
    These are the codes usable for coding causes and diagnoses.

    - `classif`: `None`, `"+"` (etiology) or `"*"` (manifestation).
    - `restr_by_sex`: `None` (any), `"F"` (female only) or `"M"` (male only).
    - `can_cause_death`: `None` (no restriction) or `"N"` (unlikely cause of death).
      Asterisk codes and chapters XIX/XXI must not be used as causes of death either.
    """
    code: str
    classif: str | None
    restr_by_sex: str | None
    can_cause_death: str | None
    description: str
    abbreviation: str
    refer: str | None
    excluded: list[str] = field(default_factory=list)


# column indices: SUBCAT;CLASSIF;RESTRSEXO;CAUSAOBITO;DESCRICAO;DESCRABREV;REFER;EXCLUIDOS
CODE = 0
CLASSIF = 1
RESTR_BY_SEX = 2
CAN_CAUSE_DEATH = 3
DESCRIPTION = 4
ABBREVIATION = 5
REFER = 6
EXCLUDED = 7

SUBCATEGORY_PARSER: RowParser[Subcategory] = RowParser(
    row_type=Subcategory,
    fields=[
        FieldSpec("code", CODE, parse_raw_text),                          # keeps the blank 4th char
        FieldSpec("classif", CLASSIF, parse_optional_text),
        FieldSpec("restr_by_sex", RESTR_BY_SEX, parse_optional_text),
        FieldSpec("can_cause_death", CAN_CAUSE_DEATH, parse_optional_text),
        FieldSpec("description", DESCRIPTION),
        FieldSpec("abbreviation", ABBREVIATION, strip_subcategory_code),   # drops "A00.0 "
        FieldSpec("refer", REFER, parse_optional_text, required=False),
        FieldSpec("excluded", EXCLUDED, split_code_list, required=False),
    ],
)


def parse_subcategory_row(raw: RawRow) -> Subcategory:
    """Parse a single subcategory's row."""
    return SUBCATEGORY_PARSER.parse(raw)
