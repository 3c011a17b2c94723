from __future__ import annotations

import pytest

from cid10_csv.ingest.table_stream import split_fields
from cid10_csv.parsing.primitives import ParseError
from cid10_csv.parsing.profiles.chapters import Chapter, parse_chapter_row
from cid10_csv.parsing.types import FieldErrorCode


def test_chapter_happy_path() -> None:
    """Good columns parse into a chapter, prefixes removed."""
    raw = split_fields("1;A00;B99;Capítulo I - Algumas doenças infecciosas e parasitárias;I.   Algumas doenças infecciosas")
    res = parse_chapter_row(raw)
    assert isinstance(res, Chapter)
    assert res.number == 1
    assert res.roman == "I"
    assert res.cat_first == "A00"
    assert res.cat_last == "B99"
    assert res.description == "Algumas doenças infecciosas e parasitárias"
    assert res.abbreviation == "Algumas doenças infecciosas"


def test_chapter_zero_without_roman_prefix() -> None:
    """Chapter 0 (unofficial codes) has no roman numeral."""
    res = parse_chapter_row(split_fields("0;U04;U99;Códigos para propósitos especiais;Códigos especiais"))
    assert res.number == 0
    assert res.roman is None
    assert res.abbreviation == "Códigos especiais"


def test_chapter_invalid_number() -> None:
    """`number` is not `int` -> ParseError."""
    with pytest.raises(ParseError) as e:
        parse_chapter_row(split_fields("I;A00;B99;Capítulo I - X;I. X"))
    assert e.value.code == FieldErrorCode.invalid_int


def test_chapter_missing_abbreviation_column() -> None:
    """Required column absent -> ParseError naming the field."""
    with pytest.raises(ParseError) as e:
        parse_chapter_row(split_fields("1;A00;B99;Capítulo I - X"))
    assert e.value.code == FieldErrorCode.missing_field
