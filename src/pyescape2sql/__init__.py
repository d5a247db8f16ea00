"""pyescape2sql - Translate JDBC escape syntax to native Transact-SQL."""

from __future__ import annotations

__version__ = "0.1.0"

from pyescape2sql._errors import (
    EscapeSyntaxError,
    MalformedCallError,
    MalformedDateError,
    MalformedEscapeCharError,
    MalformedEscapeError,
    MalformedFunctionError,
    MalformedLiteralError,
    MalformedTimeError,
    UnrecognizedEscapeError,
    UnterminatedEscapeError,
)
from pyescape2sql._escapes import EscapeKind
from pyescape2sql._translator import Translator
from pyescape2sql.dialect import Dialect, SQLServerDialect, SybaseDialect, get_dialect

__all__ = [
    "translate",
    "translate_escape",
    "get_dialect",
    "EscapeKind",
    "EscapeSyntaxError",
    "MalformedCallError",
    "MalformedDateError",
    "MalformedEscapeCharError",
    "MalformedEscapeError",
    "MalformedFunctionError",
    "MalformedLiteralError",
    "MalformedTimeError",
    "UnrecognizedEscapeError",
    "UnterminatedEscapeError",
    "Dialect",
    "SQLServerDialect",
    "SybaseDialect",
]


def translate(sql: str, *, dialect: Dialect | None = None) -> str:
    """Translate every JDBC escape sequence in a SQL statement.

    Text outside ``{...}`` is copied unchanged, and so is anything inside a
    single-quoted string literal, braces included.

    Args:
        sql: The SQL statement.
        dialect: Target dialect. Defaults to SQL Server.

    Returns:
        The statement with all escapes replaced by native SQL.

    Raises:
        EscapeSyntaxError: If an escape is unterminated, unrecognized or
            malformed. No partially translated text is returned.
    """
    if dialect is None:
        dialect = SQLServerDialect()

    translator = Translator(dialect)
    translator.translate_sql(sql)
    return translator.result


def translate_escape(body: str, *, dialect: Dialect | None = None) -> str:
    """Translate a single escape body, given without its braces.

    Args:
        body: Escape text such as ``"fn ucase(name)"`` or ``"d '2004-01-31'"``.
        dialect: Target dialect. Defaults to SQL Server.

    Returns:
        The native SQL for the escape.

    Raises:
        EscapeSyntaxError: If the body is unrecognized or malformed.
    """
    if dialect is None:
        dialect = SQLServerDialect()

    translator = Translator(dialect)
    translator.translate_escape(body)
    return translator.result
