"""Exception hierarchy for escape-syntax translation."""


class EscapeSyntaxError(Exception):
    """Base exception for escape-syntax translation errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (including the offending SQL) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnterminatedEscapeError(EscapeSyntaxError):
    """Raised when the input ends inside an escape sequence."""


class UnrecognizedEscapeError(EscapeSyntaxError):
    """Raised when an escape body starts with an unknown keyword."""


class MalformedEscapeError(EscapeSyntaxError):
    """Base for escapes whose keyword is known but whose body is invalid."""


class MalformedFunctionError(MalformedEscapeError):
    """Raised when a ``{fn ...}`` escape lacks its parentheses."""


class MalformedCallError(MalformedEscapeError):
    """Raised when a ``{call ...}`` or ``{?= call ...}`` escape is invalid."""


class MalformedLiteralError(MalformedEscapeError):
    """Base for invalid date, time and timestamp literals."""


class MalformedDateError(MalformedLiteralError):
    """Raised when a date (or the date part of a timestamp) is invalid."""


class MalformedTimeError(MalformedLiteralError):
    """Raised when a time (or the time part of a timestamp) is invalid."""


class MalformedEscapeCharError(MalformedEscapeError):
    """Raised when an ``{escape ...}`` declaration is not a one-character literal."""


# Sanitized user-facing error message constants
ERR_MSG_UNTERMINATED_ESCAPE = "syntax error in SQL escape syntax"
ERR_MSG_UNRECOGNIZED_ESCAPE = "unrecognized escape sequence"
ERR_MSG_MALFORMED_FUNCTION = "malformed function escape"
ERR_MSG_MALFORMED_CALL = "malformed procedure call"
ERR_MSG_MALFORMED_DATE = "malformed date"
ERR_MSG_MALFORMED_TIME = "malformed time"
ERR_MSG_MALFORMED_ESCAPE_CHAR = "malformed escape"
