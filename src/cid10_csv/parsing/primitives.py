from __future__ import annotations

import re

from .types import FieldErrorCode


class ParseError(Exception):
    """A field could not be converted, with details on which field and why."""

    def __init__(self, code: FieldErrorCode, detail: str) -> None:
        super().__init__(detail)
        self.code = code            # classifies the failure
        self.detail = detail        # human readable, names the field


_ROMAN_PREFIX = re.compile(r"^([IVXLCDM]+)\.\s*")
_CHAPTER_TITLE = re.compile(r"^Capítulo\s+[IVXLCDM]+\s*-\s*")
_CATEGORY_CODE = re.compile(r"^[A-Z]\d+\s+")
_SUBCATEGORY_CODE = re.compile(r"^[A-Z]\d+(\.\d+)?\s+")


## -- text fields

def parse_text(v: str) -> str:
    """Text as-is, minus surrounding whitespace."""
    return v.strip()


def parse_raw_text(v: str) -> str:
    """Text exactly as read, blanks included (fixed width codes)."""
    return v


def parse_optional_text(v: str) -> str | None:
    """
    Text for optional columns. Blank cells mean "not set" in the DATASUS files,
    so they become `None`.
    """
    s = v.strip()
    return s or None


def parse_int(v: str, *, field: str) -> int:
    """Parse integers. Raise on blanks and non integers ("1.0" included)."""
    s = v.strip()
    if not s:
        raise ParseError(FieldErrorCode.missing_field, f"{field}: missing required int")
    try:
        return int(s)
    except ValueError:
        raise ParseError(FieldErrorCode.invalid_int, f"{field}: invalid int value {v!r}")


def split_code_list(v: str) -> list[str]:
    """
    Comma separated code list, e.g. `"B00.0+,C00.0,D00.-"`.
    A blank cell is an empty list.
    """
    s = v.strip()
    if not s:
        return []
    return [code.strip() for code in s.split(",")]


## -- prefix cleanup

def roman_prefix(v: str) -> str | None:
    """Roman numeral leading an abbreviation (`"IV.  Doenças"` -> `"IV"`), if any."""
    m = _ROMAN_PREFIX.match(v.strip())
    return m.group(1) if m else None


def strip_roman_prefix(v: str) -> str:
    """`"IV.  Doenças"` -> `"Doenças"`"""
    return _ROMAN_PREFIX.sub("", v.strip(), count=1)


def strip_chapter_title(v: str) -> str:
    """`"Capítulo IV - Doenças"` -> `"Doenças"`"""
    return _CHAPTER_TITLE.sub("", v.strip(), count=1)


def strip_category_code(v: str) -> str:
    """`"A00   Colera"` -> `"Colera"`"""
    return _CATEGORY_CODE.sub("", v.strip(), count=1)


def strip_subcategory_code(v: str) -> str:
    """Also accepts a dotted subcategory code: `"A00.0 Colera"` -> `"Colera"`"""
    return _SUBCATEGORY_CODE.sub("", v.strip(), count=1)
