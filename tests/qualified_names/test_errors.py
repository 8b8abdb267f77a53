from dataclasses import FrozenInstanceError

import pytest

from src.enums import ErrorKind
from src.qualified_names.errors import NameResult, QualifiedNameError, QualifiedNameException
from src.qualified_names.qualified_name import QualifiedName


def _error() -> QualifiedNameError:
    return QualifiedNameError(ErrorKind.INVALID_FORMAT, "bad name")


def test_success_result_unwraps_to_its_value():
    name = QualifiedName.of_catalog("c")
    result = NameResult.success(name)
    assert result.ok
    assert result.unwrap() is name


def test_failure_result_raises_on_unwrap():
    error = _error()
    result = NameResult.failure(error)
    assert not result.ok
    with pytest.raises(QualifiedNameException, match="bad name") as exc_info:
        result.unwrap()
    assert exc_info.value.error is error
    assert exc_info.value.kind is ErrorKind.INVALID_FORMAT


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"value": QualifiedName.of_catalog("c"), "error": _error()},
    ],
)
def test_result_holds_exactly_one_outcome(kwargs):
    with pytest.raises(TypeError):
        NameResult(**kwargs)


def test_error_defaults_to_no_field_and_is_frozen():
    error = _error()
    assert error.field == ""
    with pytest.raises(FrozenInstanceError):
        error.message = "other"  # type: ignore[misc]


def test_exception_is_a_value_error():
    assert issubclass(QualifiedNameException, ValueError)
