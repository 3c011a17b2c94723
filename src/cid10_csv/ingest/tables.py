from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator

from cid10_csv.ingest.table_stream import stream_table
from cid10_csv.parsing.profiles.categories import CATEGORY_PARSER, Category
from cid10_csv.parsing.profiles.chapters import CHAPTER_PARSER, Chapter
from cid10_csv.parsing.profiles.groups import GROUP_PARSER, Group
from cid10_csv.parsing.profiles.morphology_categories import MORPHOLOGY_CATEGORY_PARSER, MorphologyCategory
from cid10_csv.parsing.profiles.morphology_groups import MORPHOLOGY_GROUP_PARSER, MorphologyGroup
from cid10_csv.parsing.profiles.subcategories import SUBCATEGORY_PARSER, Subcategory

# One entry point per DATASUS table file. Example:
#
#     async with aclosing(stream_chapters("CID-10-CAPITULOS.CSV")) as rows:
#         async for chapter in rows:
#             print(chapter.roman, chapter.description)


def stream_chapters(path: str | Path, chunk_size: int | None = None) -> AsyncIterator[Chapter]:
    """Rows of `CID-10-CAPITULOS.CSV`."""
    return stream_table(path, CHAPTER_PARSER, chunk_size=chunk_size)


def stream_groups(path: str | Path, chunk_size: int | None = None) -> AsyncIterator[Group]:
    """Rows of `CID-10-GRUPOS.CSV`."""
    return stream_table(path, GROUP_PARSER, chunk_size=chunk_size)


def stream_categories(path: str | Path, chunk_size: int | None = None) -> AsyncIterator[Category]:
    """Rows of `CID-10-CATEGORIAS.CSV`."""
    return stream_table(path, CATEGORY_PARSER, chunk_size=chunk_size)


def stream_subcategories(path: str | Path, chunk_size: int | None = None) -> AsyncIterator[Subcategory]:
    """Rows of `CID-10-SUBCATEGORIAS.CSV`."""
    return stream_table(path, SUBCATEGORY_PARSER, chunk_size=chunk_size)


def stream_morphology_groups(path: str | Path, chunk_size: int | None = None) -> AsyncIterator[MorphologyGroup]:
    """Rows of `CID-O-GRUPOS.CSV`."""
    return stream_table(path, MORPHOLOGY_GROUP_PARSER, chunk_size=chunk_size)


def stream_morphology_categories(
    path: str | Path, chunk_size: int | None = None
) -> AsyncIterator[MorphologyCategory]:
    """Rows of `CID-O-CATEGORIAS.CSV`."""
    return stream_table(path, MORPHOLOGY_CATEGORY_PARSER, chunk_size=chunk_size)
