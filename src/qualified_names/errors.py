"""
Failure primitives for qualified names.

- QualifiedNameError: a single rejection, as data
- NameResult: tagged success/failure returned by the validating constructors
- QualifiedNameException: raised by the convenience constructors and accessors

Notes
-----
- `field` is the structured key of the offending segment (e.g. "databaseName").
  Use "" when the failure is not tied to one field.
- Messages are one line and include the rejected input where there is one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from src.enums import ErrorKind

if TYPE_CHECKING:
    from src.qualified_names.qualified_name import QualifiedName


@dataclass(frozen=True, slots=True)
class QualifiedNameError:
    """
    A single reason a qualified name was rejected.

    kind:
        One of the closed set of ErrorKind values.
    message:
        One-line human-readable message.
    field:
        Structured key of the offending segment; empty string means "none".
    """

    kind: ErrorKind
    message: str
    field: str = ""


class QualifiedNameException(ValueError):
    """Raised when a qualified name cannot be built or an absent field is read."""

    def __init__(self, error: QualifiedNameError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True, slots=True)
class NameResult:
    """Either a valid QualifiedName or the error that prevented building one."""

    value: QualifiedName | None = None
    error: QualifiedNameError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise TypeError("NameResult holds exactly one of value or error.")

    @classmethod
    def success(cls, value: QualifiedName) -> NameResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: QualifiedNameError) -> NameResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> QualifiedName:
        """Return the name, or raise QualifiedNameException carrying the error."""
        if self.error is not None:
            raise QualifiedNameException(self.error)
        return cast("QualifiedName", self.value)
