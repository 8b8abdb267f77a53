"""Enumerations used throughout the qualified-names package."""

from enum import StrEnum


class ParseHint(StrEnum):
    """How a four-segment name string resolves its last segment."""

    PREFER_VIEW = "prefer_view"
    HEURISTIC = "heuristic"


class NameField(StrEnum):
    """Keys of the structured (key-value) form of a qualified name."""

    QUALIFIED_NAME = "qualifiedName"
    CATALOG_NAME = "catalogName"
    DATABASE_NAME = "databaseName"
    TABLE_NAME = "tableName"
    PARTITION_NAME = "partitionName"
    VIEW_NAME = "viewName"


class ErrorKind(StrEnum):
    """Closed set of reasons a qualified name can be rejected."""

    REQUIRED_FIELD = "REQUIRED_FIELD"
    STRUCTURAL_CONSISTENCY = "STRUCTURAL_CONSISTENCY"
    INVALID_FORMAT = "INVALID_FORMAT"
    MISSING_FIELD = "MISSING_FIELD"
    ILLEGAL_STATE = "ILLEGAL_STATE"
