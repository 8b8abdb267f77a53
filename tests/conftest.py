import logging

import pytest

from src.logger import LOGGER
from src.qualified_names.qualified_name import QualifiedName


@pytest.fixture
def table_name() -> QualifiedName:
    return QualifiedName.of_table("prod", "sales", "orders")


@pytest.fixture
def partition_name() -> QualifiedName:
    return QualifiedName.of_partition("prod", "sales", "orders", "dt=2024-01-01")


@pytest.fixture
def view_name() -> QualifiedName:
    return QualifiedName.of_view("prod", "sales", "orders", "daily_totals")


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture package records down to DEBUG (the configured level defaults to INFO)."""
    caplog.set_level(logging.DEBUG, logger=LOGGER.name)
    return caplog
