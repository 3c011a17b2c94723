from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .types import RowParserFn


@dataclass(frozen=True)
class TableSpec:
    """Contains a table file's expectations."""
    table_name: str
    file_name: str              # name DATASUS ships the table under
    parser: RowParserFn[Any]    # which parser this table's rows expect


# table name -> DATASUS file name, in publication order
TABLE_FILES: dict[str, str] = {
    "chapters": "CID-10-CAPITULOS.CSV",
    "groups": "CID-10-GRUPOS.CSV",
    "categories": "CID-10-CATEGORIAS.CSV",
    "subcategories": "CID-10-SUBCATEGORIAS.CSV",
    "morphology_groups": "CID-O-GRUPOS.CSV",
    "morphology_categories": "CID-O-CATEGORIAS.CSV",
}

TABLE_NAMES: tuple[str, ...] = tuple(TABLE_FILES)


def get_table_spec(table_name: str) -> TableSpec:
    """
    A registry that assigns a table its file name and row parser. Column layouts live
    in the profile modules.
    """
    if table_name == "chapters":
        from .profiles.chapters import CHAPTER_PARSER
        parser: RowParserFn[Any] = CHAPTER_PARSER
    elif table_name == "groups":
        from .profiles.groups import GROUP_PARSER
        parser = GROUP_PARSER
    elif table_name == "categories":
        from .profiles.categories import CATEGORY_PARSER
        parser = CATEGORY_PARSER
    elif table_name == "subcategories":
        from .profiles.subcategories import SUBCATEGORY_PARSER
        parser = SUBCATEGORY_PARSER
    elif table_name == "morphology_groups":
        from .profiles.morphology_groups import MORPHOLOGY_GROUP_PARSER
        parser = MORPHOLOGY_GROUP_PARSER
    elif table_name == "morphology_categories":
        from .profiles.morphology_categories import MORPHOLOGY_CATEGORY_PARSER
        parser = MORPHOLOGY_CATEGORY_PARSER
    else:
        raise ValueError(f"Unknown table_name: {table_name}")

    return TableSpec(table_name=table_name, file_name=TABLE_FILES[table_name], parser=parser)
