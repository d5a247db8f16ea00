"""Escape sequence kinds and keyword classification."""

from __future__ import annotations

import enum


class EscapeKind(enum.StrEnum):
    """Leading keyword of a ``{...}`` escape body."""

    FUNCTION = "fn"
    CALL = "call"
    DATE = "d"
    TIME = "t"
    TIMESTAMP = "ts"
    OUTER_JOIN = "oj"
    ESCAPE_CHAR = "escape"


RETURN_VALUE_MARKER = "?"
"""A body starting with this is a ``{?= call ...}`` procedure call."""

_KEYWORDS: dict[str, EscapeKind] = {kind.value: kind for kind in EscapeKind}


def classify_escape(body: str) -> EscapeKind | None:
    """Return the kind of a trimmed escape body, or None if unrecognized.

    The keyword is the leading run of non-whitespace characters and must be
    followed by whitespace, so ``"d '2004-01-01'"`` is a date but ``"d"`` and
    ``"dx '2004-01-01'"`` are not recognized.
    """
    if body.startswith(RETURN_VALUE_MARKER):
        return EscapeKind.CALL
    for i, ch in enumerate(body):
        if ch.isspace():
            return _KEYWORDS.get(body[:i].lower())
    return None


def strip_keyword(body: str, kind: EscapeKind) -> str:
    """Drop the keyword and the single whitespace character after it."""
    return body[len(kind.value) + 1:]


def has_keyword(text: str, kind: EscapeKind) -> bool:
    """Case-insensitive check that ``text`` starts with ``kind`` and whitespace."""
    n = len(kind.value)
    return len(text) > n and text[:n].lower() == kind.value and text[n].isspace()
