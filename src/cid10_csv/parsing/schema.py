from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from .primitives import ParseError, parse_text
from .types import FieldErrorCode, RawRow

T = TypeVar("T")

# Parser turns one raw cell into the output value.
Parser = Callable[[str], Any]


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Any given column's configurable expectations."""
    out_name: str               # attribute name on the row object.
    index: int                  # position of the column in the RawRow.
    parser: Parser = parse_text # how to convert this column's cell.
    required: bool = True       # whether the column must be present in the line.


@dataclass(frozen=True)
class RowParser(Generic[T]):
    """
    Build a row object out of a RawRow, column by column.

    - a missing required column raises `ParseError(missing_field)`,
    - a missing optional column is parsed as an empty cell,
    - conversion errors raised by a field parser propagate unchanged,
    - extra columns are ignored; the column count is not validated.

    Instances are callable, so they can be handed straight to a table stream.
    """
    row_type: Callable[..., T]          # receives every `out_name` as keyword
    fields: Sequence[FieldSpec]

    def parse(self, raw: RawRow) -> T:
        out: dict[str, Any] = {}
        for f in self.fields:
            if f.index < len(raw):
                cell = raw[f.index]
            elif f.required:
                raise ParseError(
                    FieldErrorCode.missing_field,
                    f"{f.out_name}: missing column {f.index} (line has {len(raw)})",
                )
            else:
                cell = ""
            out[f.out_name] = f.parser(cell)

        return self.row_type(**out)

    def __call__(self, raw: RawRow) -> T:
        return self.parse(raw)
