"""Abstract base class for native SQL dialects."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from io import StringIO


class DialectName(enum.StrEnum):
    SQLSERVER = "sqlserver"
    SYBASE = "sybase"


class Dialect(ABC):
    """Abstract base class defining the native SQL dialect interface.

    All target-syntax-specific output lives behind this interface.
    Methods receive the StringIO writer shared with the scanner, so
    output is always appended in input order.
    """

    # --- Scalar functions ---

    @abstractmethod
    def function_name(self, jdbc_name: str) -> str | None:
        """Return the native name for a lowercased JDBC function, or None."""

    @abstractmethod
    def write_function_call(self, w: StringIO, native_name: str, params: str) -> None: ...

    @abstractmethod
    def write_concat_operator(self, w: StringIO) -> None: ...

    # --- Date/time literals ---

    @abstractmethod
    def write_date_literal(self, w: StringIO, year: str, month: str, day: str) -> None: ...

    @abstractmethod
    def write_time_literal(
        self, w: StringIO, hour: str, minute: str, second: str
    ) -> None: ...

    @abstractmethod
    def write_timestamp_literal(
        self,
        w: StringIO,
        year: str,
        month: str,
        day: str,
        hour: str,
        minute: str,
        second: str,
        fraction: str,
    ) -> None: ...

    # --- Procedures ---

    @abstractmethod
    def write_procedure_call(
        self, w: StringIO, name: str, args: str | None, returns_value: bool
    ) -> None:
        """Write a stored procedure invocation.

        Args:
            w: Output buffer.
            name: Procedure name, or the whole call text when ``args`` is None.
            args: Text between the call's parentheses, or None if the
                escape had no parentheses.
            returns_value: True for the ``{?= call ...}`` form.
        """

    # --- Other clauses ---

    @abstractmethod
    def write_outer_join(self, w: StringIO, join_text: str) -> None: ...

    @abstractmethod
    def write_escape_clause(self, w: StringIO, literal: str) -> None: ...
