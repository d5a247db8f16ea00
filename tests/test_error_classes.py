"""Error class hierarchy tests."""

import pytest

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


class TestEscapeSyntaxErrorBase:
    def test_str_returns_user_message(self):
        err = EscapeSyntaxError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = EscapeSyntaxError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = EscapeSyntaxError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = EscapeSyntaxError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(EscapeSyntaxError("test"), Exception)


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        UnterminatedEscapeError,
        UnrecognizedEscapeError,
        MalformedEscapeError,
        MalformedFunctionError,
        MalformedCallError,
        MalformedLiteralError,
        MalformedDateError,
        MalformedTimeError,
        MalformedEscapeCharError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_subclass_of_escape_syntax_error(self, cls):
        assert issubclass(cls, EscapeSyntaxError)

    @pytest.mark.parametrize(
        "cls",
        [MalformedFunctionError, MalformedCallError, MalformedDateError,
         MalformedTimeError, MalformedEscapeCharError],
    )
    def test_malformed_kinds_share_base(self, cls):
        assert issubclass(cls, MalformedEscapeError)

    @pytest.mark.parametrize("cls", [MalformedDateError, MalformedTimeError])
    def test_literal_errors(self, cls):
        assert issubclass(cls, MalformedLiteralError)

    def test_scanner_errors_are_not_malformed_escapes(self):
        assert not issubclass(UnterminatedEscapeError, MalformedEscapeError)
        assert not issubclass(UnrecognizedEscapeError, MalformedEscapeError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_catchable_as_base(self, cls):
        with pytest.raises(EscapeSyntaxError):
            raise cls("msg", "details")
