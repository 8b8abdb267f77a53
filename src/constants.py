"""Shared constant values used across the qualified-names package."""

from typing import Final

NAME_DELIMITER: Final[str] = "/"
MAX_NAME_SEGMENTS: Final[int] = 4
PARTITION_MARKER: Final[str] = "="
WILDCARD: Final[str] = "%"
IDENTIFIER_DELIMITER: Final[str] = "."
