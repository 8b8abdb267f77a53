"""
Dotted table identifiers for qualified names.

SQL engines and metadata backends address tables as 'catalog.schema.table'.
This module converts between that form and QualifiedName:
- quote_identifier / quote_table_identifier: backticked form for SQL text.
- format_table_identifier: unquoted 'catalog.database.table'.
- parse_table_identifier: three dot-separated parts -> table-level QualifiedName.

Conventions:
- Verbs: quote_*, format_*, parse_*.
- Partition and view levels are dropped; only the owning table is addressed.
"""

from __future__ import annotations

from src.constants import IDENTIFIER_DELIMITER
from src.enums import ErrorKind
from src.qualified_names.errors import QualifiedNameError, QualifiedNameException
from src.qualified_names.qualified_name import QualifiedName


def quote_identifier(identifier: str) -> str:
    """Quote a single SQL identifier using backticks, doubling any embedded backticks."""
    text = str(identifier)
    return f"`{text.replace('`', '``')}`"


def _table_parts(name: QualifiedName) -> tuple[str, str, str]:
    # database_name/table_name raise ILLEGAL_STATE for names above table level
    return (name.catalog_name, name.database_name, name.table_name)


def format_table_identifier(name: QualifiedName) -> str:
    """Unquoted: 'catalog.database.table'."""
    return IDENTIFIER_DELIMITER.join(_table_parts(name))


def quote_table_identifier(name: QualifiedName) -> str:
    """Backticked: `` `catalog`.`database`.`table` ``."""
    return IDENTIFIER_DELIMITER.join(quote_identifier(part) for part in _table_parts(name))


def parse_table_identifier(identifier: str) -> QualifiedName:
    """
    Parse 'catalog.database.table' (with or without backticks on parts).

    This is a simple parser: it strips backticks and whitespace and splits on '.'.
    """
    cleaned = str(identifier).replace("`", "").strip()
    parts = [part.strip() for part in cleaned.split(IDENTIFIER_DELIMITER)]
    if len(parts) != 3 or any(part == "" for part in parts):
        raise QualifiedNameException(
            QualifiedNameError(
                ErrorKind.INVALID_FORMAT,
                f"Expected three-part name 'catalog.database.table', got: {identifier!r}",
            )
        )
    return QualifiedName.of_table(*parts)
