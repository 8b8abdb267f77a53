"""
Adapters between qualified names and structured documents.

QualifiedName only understands FieldLookup. This module bridges concrete
representations into it:
- plain mappings (dicts decoded from any wire format),
- JSON text (standard library json),
- YAML text (PyYAML, safe loader/dumper only).

Writers emit the structured form: {"qualifiedName": ..., "catalogName": ..., ...}.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from src.enums import ErrorKind
from src.logger import get_logger
from src.qualified_names.errors import NameResult, QualifiedNameError
from src.qualified_names.qualified_name import QualifiedName

LOGGER = get_logger("documents")


class MappingFieldLookup:
    """FieldLookup over any mapping. Non-string values read as missing."""

    def __init__(self, mapping: Mapping[str, Any]):
        self.mapping = mapping

    def get_text(self, key: str) -> str | None:
        value = self.mapping.get(key)
        return value if isinstance(value, str) else None


# -----------------------------
# Mappings
# -----------------------------


def parse_mapping(document: Any) -> NameResult:
    """Build a name from a decoded document; anything but a mapping is rejected."""
    if not isinstance(document, Mapping):
        return NameResult.failure(
            QualifiedNameError(
                ErrorKind.INVALID_FORMAT,
                f"Expected an object for a qualified name, got {type(document).__name__}",
            )
        )
    return QualifiedName.parse_structured(MappingFieldLookup(document))


def name_from_mapping(document: Mapping[str, Any]) -> QualifiedName:
    return parse_mapping(document).unwrap()


def name_to_mapping(name: QualifiedName) -> dict[str, str]:
    """Mutable copy of the structured form, ready for a serializer."""
    return dict(name.to_structured())


# -----------------------------
# JSON
# -----------------------------


def name_from_json(text: str) -> QualifiedName:
    """Decode a JSON object into a QualifiedName. Malformed JSON raises json.JSONDecodeError."""
    document = json.loads(text)
    LOGGER.debug("Decoded JSON qualified name document: %s", document)
    return parse_mapping(document).unwrap()


def name_to_json(name: QualifiedName, *, indent: int | None = None) -> str:
    return json.dumps(name_to_mapping(name), indent=indent, sort_keys=True)


# -----------------------------
# YAML
# -----------------------------


def name_from_yaml(text: str) -> QualifiedName:
    """Load a YAML mapping into a QualifiedName. Malformed YAML raises yaml.YAMLError."""
    document = yaml.safe_load(text)
    LOGGER.debug("Loaded YAML qualified name document: %s", document)
    return parse_mapping(document).unwrap()


def name_to_yaml(name: QualifiedName) -> str:
    return yaml.safe_dump(name_to_mapping(name), sort_keys=True, default_flow_style=False)
