"""Shared test fixtures."""

import pytest

from pyescape2sql.dialect.sqlserver import SQLServerDialect, SybaseDialect


@pytest.fixture
def sqlserver_dialect():
    return SQLServerDialect()


@pytest.fixture
def sybase_dialect():
    return SybaseDialect()


ALL_DIALECTS = [
    SQLServerDialect(),
    SybaseDialect(),
]
