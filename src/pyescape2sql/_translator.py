"""Core Translator class - JDBC escape scanner and sub-translators."""

from __future__ import annotations

import enum
import logging
from io import StringIO
from typing import assert_never

from pyescape2sql._constants import (
    DATE_LENGTH,
    DATE_SEPARATOR,
    FRACTION_DIGITS,
    FRACTION_SEPARATOR,
    LITERAL_QUOTES,
    TIME_LENGTH,
    TIME_SEPARATOR,
    TIMESTAMP_MIN_LENGTH,
)
from pyescape2sql._errors import (
    ERR_MSG_MALFORMED_CALL,
    ERR_MSG_MALFORMED_DATE,
    ERR_MSG_MALFORMED_ESCAPE_CHAR,
    ERR_MSG_MALFORMED_FUNCTION,
    ERR_MSG_MALFORMED_TIME,
    ERR_MSG_UNRECOGNIZED_ESCAPE,
    ERR_MSG_UNTERMINATED_ESCAPE,
    MalformedCallError,
    MalformedDateError,
    MalformedEscapeCharError,
    MalformedFunctionError,
    MalformedLiteralError,
    MalformedTimeError,
    UnrecognizedEscapeError,
    UnterminatedEscapeError,
)
from pyescape2sql._escapes import (
    RETURN_VALUE_MARKER,
    EscapeKind,
    classify_escape,
    has_keyword,
    strip_keyword,
)
from pyescape2sql.dialect._base import Dialect

logger = logging.getLogger("pyescape2sql.translator")


class ScanState(enum.Enum):
    NORMAL = enum.auto()
    IN_STRING = enum.auto()
    IN_ESCAPE = enum.auto()


def _skip_whitespace(s: str, i: int) -> int:
    """Return the index of the next non-whitespace character at or after i."""
    while i < len(s) and s[i].isspace():
        i += 1
    return i


def _skip_quote(s: str, i: int) -> int:
    """Step over one optional quote character at i."""
    if i < len(s) and s[i] in LITERAL_QUOTES:
        i += 1
    return i


def _is_digits(s: str) -> bool:
    # ASCII only; str.isdigit alone would accept superscripts and other scripts
    return s.isascii() and s.isdigit()


class Translator:
    """Rewrites JDBC escape sequences in a SQL statement to native SQL.

    A Translator holds the output buffer for a single statement and is not
    reused. The scanner and every sub-translator append to the same buffer,
    so output is produced strictly left to right.
    """

    def __init__(self, dialect: Dialect) -> None:
        self._w = StringIO()
        self._dialect = dialect

    @property
    def result(self) -> str:
        return self._w.getvalue()

    # ---- Scanner ----

    def translate_sql(self, sql: str) -> None:
        """Scan ``sql`` once, copying plain text and translating escapes.

        Raises:
            UnterminatedEscapeError: If the input ends inside ``{...}``.
            EscapeSyntaxError: If any escape body is invalid.
        """
        w = self._w
        escape: list[str] = []
        state = ScanState.NORMAL

        for ch in sql:
            if state is ScanState.NORMAL:
                if ch == "{":
                    state = ScanState.IN_ESCAPE
                    escape.clear()
                else:
                    w.write(ch)
                    if ch == "'":
                        state = ScanState.IN_STRING
            elif state is ScanState.IN_STRING:
                w.write(ch)
                # A doubled quote flips the state twice and stays in the string.
                if ch == "'":
                    state = ScanState.NORMAL
            else:
                if ch == "}":
                    self.translate_escape("".join(escape))
                    state = ScanState.NORMAL
                else:
                    escape.append(ch)

        if state is ScanState.IN_ESCAPE:
            raise UnterminatedEscapeError(
                ERR_MSG_UNTERMINATED_ESCAPE,
                f"unterminated escape sequence: {{{''.join(escape)}",
            )

    # ---- Dispatcher ----

    def translate_escape(self, escape: str) -> None:
        """Translate one escape body (the text between ``{`` and ``}``)."""
        body = escape.strip()
        kind = classify_escape(body)
        if kind is None:
            raise UnrecognizedEscapeError(
                ERR_MSG_UNRECOGNIZED_ESCAPE,
                f"unrecognized escape sequence: {escape}",
            )

        logger.debug("translating %s escape", kind.name.lower())
        match kind:
            case EscapeKind.FUNCTION:
                self._translate_function(body)
            case EscapeKind.CALL:
                self._translate_call(body)
            case EscapeKind.DATE:
                self._translate_date(body)
            case EscapeKind.TIME:
                self._translate_time(body)
            case EscapeKind.TIMESTAMP:
                self._translate_timestamp(body)
            case EscapeKind.OUTER_JOIN:
                self._dialect.write_outer_join(
                    self._w, strip_keyword(body, EscapeKind.OUTER_JOIN)
                )
            case EscapeKind.ESCAPE_CHAR:
                self._translate_escape_char(body)
            case _:
                assert_never(kind)

    # ---- Functions ----

    def _translate_function(self, body: str) -> None:
        text = strip_keyword(body, EscapeKind.FUNCTION)
        paren = text.find("(")
        if paren < 0:
            raise MalformedFunctionError(
                ERR_MSG_MALFORMED_FUNCTION,
                f"malformed function escape, expected '(': {text}",
            )
        if not text.endswith(")"):
            raise MalformedFunctionError(
                ERR_MSG_MALFORMED_FUNCTION,
                f"malformed function escape, expected ')' at {len(text) - 1}: {text}",
            )

        name = text[:paren].strip().lower()
        if name == "concat":
            self._translate_concat(text[paren:])
            return

        native_name = self._dialect.function_name(name)
        if native_name is None:
            # Unknown functions go through untouched; the server decides.
            logger.debug("no native mapping for function %r, passing through", name)
            self._w.write(text)
            return
        self._dialect.write_function_call(self._w, native_name, text[paren:])

    def _translate_concat(self, args: str) -> None:
        """Rewrite ``("Hot", col)`` as ``('Hot'+ col)``.

        CONCAT arguments quote string literals with double quotes. Every
        ``"`` toggles the literal flag, so a doubled ``""`` inside a literal
        closes and reopens it rather than producing an embedded quote.
        """
        w = self._w
        in_literal = False
        for ch in args:
            if in_literal:
                if ch == "'":
                    w.write("''")
                elif ch == '"':
                    w.write("'")
                    in_literal = False
                else:
                    w.write(ch)
            elif ch == ",":
                self._dialect.write_concat_operator(w)
            elif ch == '"':
                w.write("'")
                in_literal = True
            else:
                w.write(ch)

    # ---- Procedure calls ----

    def _translate_call(self, body: str) -> None:
        text = body
        returns_value = body.startswith(RETURN_VALUE_MARKER)

        if returns_value:
            i = _skip_whitespace(body, len(RETURN_VALUE_MARKER))
            if i >= len(body) or body[i] != "=":
                raise MalformedCallError(
                    ERR_MSG_MALFORMED_CALL,
                    f"malformed procedure call, '=' expected at {i}: {body}",
                )
            i = _skip_whitespace(body, i + 1)
            text = body[i:]
            if not has_keyword(text, EscapeKind.CALL):
                raise MalformedCallError(
                    ERR_MSG_MALFORMED_CALL,
                    f"malformed procedure call, 'call ' expected at {i}: {body}",
                )

        text = strip_keyword(text, EscapeKind.CALL).strip()
        paren = text.find("(")
        if paren < 0:
            self._dialect.write_procedure_call(self._w, text, None, returns_value)
            return

        if not text.endswith(")"):
            raise MalformedCallError(
                ERR_MSG_MALFORMED_CALL,
                f"malformed procedure call, ')' expected at {len(body) - 1}: {body}",
            )
        self._dialect.write_procedure_call(
            self._w, text[:paren], text[paren + 1:-1], returns_value
        )

    # ---- Date/time literals ----

    def _read_date(self, s: str, i: int, min_length: int) -> tuple[str, str, str]:
        """Read ``yyyy-mm-dd`` starting at i."""
        if (
            len(s) - i < min_length
            or s[i + 4] != DATE_SEPARATOR
            or s[i + 7] != DATE_SEPARATOR
        ):
            raise MalformedDateError(ERR_MSG_MALFORMED_DATE, f"malformed date: {s}")

        year, month, day = s[i:i + 4], s[i + 5:i + 7], s[i + 8:i + 10]
        if not (_is_digits(year) and _is_digits(month) and _is_digits(day)):
            raise MalformedDateError(
                ERR_MSG_MALFORMED_DATE, f"non-numeric date field: {s}"
            )
        return year, month, day

    def _read_time(self, s: str, i: int) -> tuple[str, str, str]:
        """Read ``hh:mm:ss`` starting at i."""
        if (
            len(s) - i < TIME_LENGTH
            or s[i + 2] != TIME_SEPARATOR
            or s[i + 5] != TIME_SEPARATOR
        ):
            raise MalformedTimeError(ERR_MSG_MALFORMED_TIME, f"malformed time: {s}")

        hour, minute, second = s[i:i + 2], s[i + 3:i + 5], s[i + 6:i + 8]
        if not (_is_digits(hour) and _is_digits(minute) and _is_digits(second)):
            raise MalformedTimeError(
                ERR_MSG_MALFORMED_TIME, f"non-numeric time field: {s}"
            )
        return hour, minute, second

    def _check_literal_end(
        self, s: str, i: int, error: type[MalformedLiteralError], message: str
    ) -> None:
        """The literal must be followed only by an optional quote and whitespace."""
        i = _skip_whitespace(s, i)
        i = _skip_quote(s, i)
        i = _skip_whitespace(s, i)
        if i < len(s):
            raise error(message, f"unexpected text after literal at {i}: {s}")

    def _literal_start(self, body: str, kind: EscapeKind) -> int:
        i = _skip_whitespace(body, len(kind.value) + 1)
        return _skip_quote(body, i)

    def _translate_date(self, body: str) -> None:
        i = self._literal_start(body, EscapeKind.DATE)
        year, month, day = self._read_date(body, i, DATE_LENGTH)
        self._check_literal_end(
            body, i + DATE_LENGTH, MalformedDateError, ERR_MSG_MALFORMED_DATE
        )
        self._dialect.write_date_literal(self._w, year, month, day)

    def _translate_time(self, body: str) -> None:
        i = self._literal_start(body, EscapeKind.TIME)
        hour, minute, second = self._read_time(body, i)
        self._check_literal_end(
            body, i + TIME_LENGTH, MalformedTimeError, ERR_MSG_MALFORMED_TIME
        )
        self._dialect.write_time_literal(self._w, hour, minute, second)

    def _translate_timestamp(self, body: str) -> None:
        i = self._literal_start(body, EscapeKind.TIMESTAMP)
        year, month, day = self._read_date(body, i, TIMESTAMP_MIN_LENGTH)

        i += DATE_LENGTH
        if not body[i].isspace():
            raise MalformedDateError(
                ERR_MSG_MALFORMED_DATE,
                f"expected whitespace between date and time at {i}: {body}",
            )
        i = _skip_whitespace(body, i)

        hour, minute, second = self._read_time(body, i)
        i += TIME_LENGTH

        fraction = "0" * FRACTION_DIGITS
        if i < len(body) and body[i] == FRACTION_SEPARATOR:
            i += 1
            start = i
            while i < len(body) and _is_digits(body[i]):
                i += 1
            fraction = body[start:i][:FRACTION_DIGITS].ljust(FRACTION_DIGITS, "0")

        self._check_literal_end(body, i, MalformedDateError, ERR_MSG_MALFORMED_DATE)
        self._dialect.write_timestamp_literal(
            self._w, year, month, day, hour, minute, second, fraction
        )

    # ---- ESCAPE clause ----

    def _translate_escape_char(self, body: str) -> None:
        literal = strip_keyword(body, EscapeKind.ESCAPE_CHAR).strip()

        # 'X' with any X but a quote, or '''' when the quote itself escapes.
        # The quote must be doubled or the literal would stay open.
        valid_shape = (len(literal) == 3 and literal[1] != "'") or (
            len(literal) == 4 and literal[1:3] == "''"
        )
        if not valid_shape or literal[0] != "'" or literal[-1] != "'":
            raise MalformedEscapeCharError(
                ERR_MSG_MALFORMED_ESCAPE_CHAR, f"malformed escape: {body}"
            )
        self._dialect.write_escape_clause(self._w, literal)
