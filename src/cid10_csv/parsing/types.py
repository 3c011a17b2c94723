from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

T = TypeVar("T")

# One decoded, unterminated line split on `;`. Whitespace is left untouched.
RawRow = list[str]

# Pure conversion from a RawRow into an application row object.
RowParserFn = Callable[[RawRow], T]


class FieldErrorCode(str, Enum):
    """Typed field failure classifications."""
    missing_field = "missing_field"
    invalid_int = "invalid_int"


def keep_raw(raw: RawRow) -> RawRow:
    """Default row parser: hands back the raw fields unchanged."""
    return raw
