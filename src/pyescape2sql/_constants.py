"""Fixed widths and separators for JDBC escape literals."""

DATE_LENGTH = 10
"""Length of a ``yyyy-mm-dd`` date literal."""

TIME_LENGTH = 8
"""Length of a ``hh:mm:ss`` time literal."""

TIMESTAMP_MIN_LENGTH = 19
"""Minimum length of a ``yyyy-mm-dd hh:mm:ss`` timestamp literal."""

FRACTION_DIGITS = 3
"""Fractional seconds are truncated or zero-padded to millisecond precision."""

DATE_SEPARATOR = "-"
TIME_SEPARATOR = ":"
FRACTION_SEPARATOR = "."

LITERAL_QUOTES = ("'", '"')
"""Optional quote characters accepted around date/time literals."""
