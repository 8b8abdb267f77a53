import pytest

from src.enums import ErrorKind
from src.qualified_names import identifiers as i
from src.qualified_names.errors import QualifiedNameException
from src.qualified_names.qualified_name import QualifiedName


# --- quote_identifier ---


def test_quote_identifier_quotes_and_escapes_backticks():
    assert i.quote_identifier("plain") == "`plain`"
    assert i.quote_identifier("we`ird") == "`we``ird`"
    assert i.quote_identifier("") == "``"


# --- format / quote ---


def test_format_table_identifier(table_name):
    assert i.format_table_identifier(table_name) == "prod.sales.orders"


def test_quote_table_identifier(table_name):
    assert i.quote_table_identifier(table_name) == "`prod`.`sales`.`orders`"


def test_partition_and_view_address_their_table(partition_name, view_name):
    assert i.format_table_identifier(partition_name) == "prod.sales.orders"
    assert i.format_table_identifier(view_name) == "prod.sales.orders"


@pytest.mark.parametrize(
    "name",
    [QualifiedName.of_catalog("c"), QualifiedName.of_database("c", "d")],
)
def test_names_above_table_level_have_no_table_identifier(name):
    with pytest.raises(QualifiedNameException) as exc_info:
        i.format_table_identifier(name)
    assert exc_info.value.kind is ErrorKind.ILLEGAL_STATE


# --- parse_table_identifier ---


def test_parse_table_identifier_strips_backticks_and_normalizes():
    name = i.parse_table_identifier(" `Main`.`Sales`.`Orders` ")
    assert name == QualifiedName.of_table("main", "sales", "orders")


def test_parse_then_format_round_trip():
    assert i.format_table_identifier(i.parse_table_identifier("a.b.c")) == "a.b.c"


@pytest.mark.parametrize(
    "bad",
    [
        "a.b",          # too few parts
        "a.b.c.d",      # too many parts
        ".b.c",         # empty catalog
        "a..c",         # empty database
        "a.b.",         # empty table
        "",             # empty string
    ],
)
def test_parse_table_identifier_errors(bad):
    with pytest.raises(QualifiedNameException) as exc_info:
        i.parse_table_identifier(bad)
    assert exc_info.value.kind is ErrorKind.INVALID_FORMAT
