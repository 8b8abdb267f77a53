"""
The QualifiedName value type.

A qualified name addresses one entity in the hierarchy
catalog -> database -> table -> (partition | view) and renders as
'catalog/database/table/partition-or-view'.

Conventions:
- Absent levels are stored as "", never None.
- catalog, database, table and view are lower-cased; partition keeps its case
  (partition values such as dates may be case-sensitive).
- `create`, `parse` and `parse_structured` return a NameResult and never raise
  for invalid names or hints. The `of_*` and `from_*` constructors return
  the name or raise QualifiedNameException.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src import settings
from src.constants import MAX_NAME_SEGMENTS, NAME_DELIMITER, PARTITION_MARKER, WILDCARD
from src.enums import ErrorKind, NameField, ParseHint
from src.logger import get_logger
from src.qualified_names.errors import NameResult, QualifiedNameError, QualifiedNameException
from src.qualified_names.types import FieldLookup, PartitionDescriptor

LOGGER = get_logger("qualified_name")

# Constructor argument -> structured key, in canonical order.
_SEGMENT_FIELDS: Mapping[str, NameField] = MappingProxyType(
    {
        "catalog": NameField.CATALOG_NAME,
        "database": NameField.DATABASE_NAME,
        "table": NameField.TABLE_NAME,
        "partition": NameField.PARTITION_NAME,
        "view": NameField.VIEW_NAME,
    }
)

_Segments = tuple[str, str, str, str, str]


@dataclass(frozen=True)
class QualifiedName:
    """Immutable, validated name of a catalog, database, table, partition or view."""

    catalog: str
    database: str = ""
    table: str = ""
    partition: str = ""
    view: str = ""
    qualified_name: str = field(init=False, repr=False, compare=False)
    _structured: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        segments = _standardize(self.catalog, self.database, self.table, self.partition, self.view)
        if isinstance(segments, QualifiedNameError):
            raise QualifiedNameException(segments)

        for attribute, value in zip(_SEGMENT_FIELDS, segments):
            object.__setattr__(self, attribute, value)
        object.__setattr__(self, "qualified_name", _render(segments))
        object.__setattr__(self, "_structured", MappingProxyType(_structure(segments)))

    def __str__(self) -> str:
        return self.qualified_name

    def __reduce__(self) -> tuple[type[QualifiedName], _Segments]:
        return (type(self), self._segments)

    # --------- Validating constructors ---------

    @classmethod
    def create(
        cls,
        catalog: str | None,
        database: str | None = None,
        table: str | None = None,
        partition: str | None = None,
        view: str | None = None,
    ) -> NameResult:
        """Normalize and validate the segments; every construction path ends here."""
        segments = _standardize(catalog, database, table, partition, view)
        if isinstance(segments, QualifiedNameError):
            return NameResult.failure(segments)
        return NameResult.success(cls(*segments))

    @classmethod
    def parse(cls, raw: str | None, hint: ParseHint | str | None = None) -> NameResult:
        """
        Parse 'catalog[/database[/table[/partition-or-view]]]'.

        The string is split on '/' at most three times, so a fourth segment keeps
        any further slashes. A fourth segment is a view when `hint` is
        PREFER_VIEW or when it has no '=', and a partition otherwise.
        """
        if hint is None:
            hint = settings.DEFAULT_PARSE_HINT
        elif hint not in tuple(ParseHint):
            return NameResult.failure(
                QualifiedNameError(ErrorKind.INVALID_FORMAT, f"Unknown parse hint {hint!r}")
            )
        text = raw.strip() if isinstance(raw, str) else ""
        if not text:
            return NameResult.failure(
                QualifiedNameError(ErrorKind.INVALID_FORMAT, "passed in an empty definition name")
            )

        parts = text.split(NAME_DELIMITER, MAX_NAME_SEGMENTS - 1)
        if len(parts) == 1:
            return cls.create(parts[0])
        if len(parts) == 2:
            return cls.create(parts[0], parts[1])
        if len(parts) == 3:
            return cls.create(parts[0], parts[1], parts[2])
        if len(parts) == MAX_NAME_SEGMENTS:
            catalog, database, table, last = parts
            if hint == ParseHint.PREFER_VIEW or PARTITION_MARKER not in last:
                LOGGER.debug("Reading %r as a view name (hint=%s).", text, hint)
                return cls.create(catalog, database, table, view=last)
            LOGGER.debug("Reading %r as a partition name.", text)
            return cls.create(catalog, database, table, partition=last)

        return NameResult.failure(
            QualifiedNameError(
                ErrorKind.INVALID_FORMAT,
                f"Unable to convert {raw!r} into a qualified name",
            )
        )

    @classmethod
    def parse_structured(cls, node: FieldLookup) -> NameResult:
        """
        Build a name from a structured record.

        Reads catalogName, databaseName, tableName, partitionName and viewName.
        When catalogName is missing (or not a string) the qualifiedName field is
        parsed instead, with the heuristic hint.
        """
        catalog = node.get_text(NameField.CATALOG_NAME)
        if catalog is None:
            qualified = node.get_text(NameField.QUALIFIED_NAME)
            if qualified is None:
                return NameResult.failure(
                    QualifiedNameError(
                        ErrorKind.MISSING_FIELD,
                        "Structured name is missing catalogName and qualifiedName",
                        field=NameField.CATALOG_NAME,
                    )
                )
            LOGGER.debug("No catalogName present, parsing qualifiedName %r.", qualified)
            return cls.parse(qualified, ParseHint.HEURISTIC)

        return cls.create(
            catalog,
            database=node.get_text(NameField.DATABASE_NAME),
            table=node.get_text(NameField.TABLE_NAME),
            partition=node.get_text(NameField.PARTITION_NAME),
            view=node.get_text(NameField.VIEW_NAME),
        )

    # --------- Raising constructors ---------

    @classmethod
    def of_catalog(cls, catalog: str) -> QualifiedName:
        return cls.create(catalog).unwrap()

    @classmethod
    def of_database(cls, catalog: str, database: str) -> QualifiedName:
        """Database name; unlike `create`, a blank database is rejected."""
        name = cls.create(catalog, database).unwrap()
        if not name.is_database_definition:
            raise QualifiedNameException(_required_error(NameField.DATABASE_NAME, database))
        return name

    @classmethod
    def of_table(cls, catalog: str, database: str, table: str) -> QualifiedName:
        return cls.create(catalog, database, table).unwrap()

    @classmethod
    def of_view(cls, catalog: str, database: str, table: str, view: str) -> QualifiedName:
        return cls.create(catalog, database, table, view=view).unwrap()

    @classmethod
    def of_partition(
        cls, catalog: str, database: str, table: str, partition: str
    ) -> QualifiedName:
        return cls.create(catalog, database, table, partition=partition).unwrap()

    @classmethod
    def of_partition_descriptor(
        cls, table_name: QualifiedName, descriptor: PartitionDescriptor
    ) -> QualifiedName:
        """Partition name under `table_name`, taken from the descriptor's own name."""
        return cls.of_partition(
            table_name.catalog,
            table_name.database,
            table_name.table,
            descriptor.name.partition_name,
        )

    @classmethod
    def from_string(cls, raw: str, hint: ParseHint | str | None = None) -> QualifiedName:
        return cls.parse(raw, hint).unwrap()

    @classmethod
    def from_structured(cls, node: FieldLookup) -> QualifiedName:
        return cls.parse_structured(node).unwrap()

    # --------- Queries ---------

    @property
    def is_catalog_definition(self) -> bool:
        return bool(self.catalog)

    @property
    def is_database_definition(self) -> bool:
        return bool(self.database)

    @property
    def is_table_definition(self) -> bool:
        return bool(self.table)

    @property
    def is_partition_definition(self) -> bool:
        return bool(self.partition)

    @property
    def is_view_definition(self) -> bool:
        return bool(self.view)

    @property
    def catalog_name(self) -> str:
        return self.catalog

    @property
    def database_name(self) -> str:
        """Database name; raises QualifiedNameException if there is none."""
        return self._require_present(self.database, NameField.DATABASE_NAME, "database")

    @property
    def table_name(self) -> str:
        """Table name; raises QualifiedNameException if there is none."""
        return self._require_present(self.table, NameField.TABLE_NAME, "table")

    @property
    def partition_name(self) -> str:
        """Partition name; raises QualifiedNameException if there is none."""
        return self._require_present(self.partition, NameField.PARTITION_NAME, "partition")

    @property
    def view_name(self) -> str:
        """View name, or "" when this is not a view definition."""
        return self.view

    @property
    def parent(self) -> QualifiedName | None:
        """The name one level up, or None for a catalog."""
        segments = list(self._segments)
        for index in range(len(segments) - 1, 0, -1):
            if segments[index]:
                segments[index] = ""
                return type(self)(*segments)
        return None

    # --------- Serialization ---------

    def to_structured(self) -> Mapping[str, str]:
        """Read-only key-value form: qualifiedName plus each present level."""
        return self._structured

    @staticmethod
    def to_wildcard_string(
        source: str | None, database: str | None, table: str | None
    ) -> str | None:
        """
        Build a prefix pattern such as 'source/%/table%' for catalog searches.

        Each None component becomes '%'. Returns None when all three are None,
        meaning "no filter".
        """
        if source is None and database is None and table is None:
            return None
        parts = [WILDCARD if part is None else part for part in (source, database, table)]
        return NAME_DELIMITER.join(parts) + WILDCARD

    # --------- Helpers ---------

    @property
    def _segments(self) -> _Segments:
        return (self.catalog, self.database, self.table, self.partition, self.view)

    def _require_present(self, value: str, key: NameField, level: str) -> str:
        if not value:
            raise QualifiedNameException(
                QualifiedNameError(
                    ErrorKind.ILLEGAL_STATE,
                    f"'{self}' is not a {level} definition",
                    field=key,
                )
            )
        return value


# -----------------
# Normalization
# -----------------


def _required_error(key: NameField, value: object) -> QualifiedNameError:
    reason = "cannot be null" if value is None else "cannot be an empty string"
    return QualifiedNameError(ErrorKind.REQUIRED_FIELD, f"{key} {reason}", field=key)


def _standardize_optional(value: object, *, lower: bool) -> str:
    if value is None:
        return ""
    text = str(value).strip()
    return text.lower() if lower else text


def _standardize(
    catalog: object,
    database: object,
    table: object,
    partition: object,
    view: object,
) -> _Segments | QualifiedNameError:
    """Trim and case-fold each segment, then check the hierarchy has no gaps."""
    if catalog is None or not str(catalog).strip():
        return _required_error(NameField.CATALOG_NAME, catalog)

    catalog_name = str(catalog).strip().lower()
    database_name = _standardize_optional(database, lower=True)
    table_name = _standardize_optional(table, lower=True)
    partition_name = _standardize_optional(partition, lower=False)
    view_name = _standardize_optional(view, lower=True)

    if not database_name and (table_name or partition_name):
        return QualifiedNameError(
            ErrorKind.STRUCTURAL_CONSISTENCY,
            "databaseName is not present but tableName or partitionName are present",
            field=NameField.DATABASE_NAME,
        )
    if not table_name and partition_name:
        return QualifiedNameError(
            ErrorKind.STRUCTURAL_CONSISTENCY,
            "tableName is not present but partitionName is present",
            field=NameField.TABLE_NAME,
        )
    return (catalog_name, database_name, table_name, partition_name, view_name)


def _render(segments: _Segments) -> str:
    return NAME_DELIMITER.join(segment for segment in segments if segment)


def _structure(segments: _Segments) -> dict[str, str]:
    structured = {NameField.QUALIFIED_NAME.value: _render(segments)}
    for key, value in zip(_SEGMENT_FIELDS.values(), segments):
        if value:
            structured[key.value] = value
    return structured
