"""SQL Server and Sybase (Transact-SQL) dialect implementation."""

from __future__ import annotations

from collections.abc import Mapping
from io import StringIO

from pyescape2sql._keywords import FUNCTION_MAP
from pyescape2sql.dialect._base import Dialect


class SQLServerDialect(Dialect):
    """Microsoft SQL Server dialect for escape translation."""

    function_map: Mapping[str, str] = FUNCTION_MAP

    # --- Scalar functions ---

    def function_name(self, jdbc_name: str) -> str | None:
        return self.function_map.get(jdbc_name)

    def write_function_call(self, w: StringIO, native_name: str, params: str) -> None:
        w.write(native_name)
        w.write(params)

    def write_concat_operator(self, w: StringIO) -> None:
        w.write("+")

    # --- Date/time literals ---

    def write_date_literal(self, w: StringIO, year: str, month: str, day: str) -> None:
        # yyyymmdd is read the same way under every DATEFORMAT setting
        w.write(f"'{year}{month}{day}'")

    def write_time_literal(
        self, w: StringIO, hour: str, minute: str, second: str
    ) -> None:
        w.write(f"'{hour}:{minute}:{second}'")

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
    ) -> None:
        w.write(f"'{year}{month}{day} {hour}:{minute}:{second}.{fraction}'")

    # --- Procedures ---

    def write_procedure_call(
        self, w: StringIO, name: str, args: str | None, returns_value: bool
    ) -> None:
        w.write("exec ")
        if returns_value:
            w.write("?=")
        w.write(name)
        if args is not None:
            w.write(" ")
            w.write(args)

    # --- Other clauses ---

    def write_outer_join(self, w: StringIO, join_text: str) -> None:
        w.write(join_text)

    def write_escape_clause(self, w: StringIO, literal: str) -> None:
        w.write("ESCAPE ")
        w.write(literal)


class SybaseDialect(SQLServerDialect):
    """Sybase ASE dialect.

    Shares the Transact-SQL forms of SQL Server: yyyymmdd date strings,
    ``exec`` procedure calls and the same built-in function names.
    """
