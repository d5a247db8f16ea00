"""ESCAPE clause and outer join escape tests."""

import pytest

from pyescape2sql import translate
from pyescape2sql._errors import MalformedEscapeCharError


class TestEscapeChar:
    def test_slash(self):
        assert translate("{escape '/'}") == "ESCAPE '/'"

    def test_backslash(self):
        assert translate("{escape '\\'}") == "ESCAPE '\\'"

    def test_doubled_quote_as_escape_char(self):
        assert translate("{escape ''''}") == "ESCAPE ''''"

    def test_surrounding_whitespace_trimmed(self):
        assert translate("{escape   '!'  }") == "ESCAPE '!'"

    def test_in_like_predicate(self):
        result = translate("SELECT * FROM t WHERE a LIKE '50/%' {escape '/'}")
        assert result == "SELECT * FROM t WHERE a LIKE '50/%' ESCAPE '/'"

    def test_keyword_case_insensitive(self):
        assert translate("{ESCAPE '/'}") == "ESCAPE '/'"

    @pytest.mark.parametrize(
        "escape",
        [
            "{escape '//'}",
            "{escape '''}",
            "{escape /}",
            "{escape '/}",
            "{escape \"/\"}",
            "{escape 'a''}",
            "{escape ''a'}",
        ],
    )
    def test_malformed(self, escape):
        with pytest.raises(MalformedEscapeCharError, match="malformed escape"):
            translate(escape)


class TestOuterJoin:
    def test_left_outer_join(self):
        result = translate(
            "SELECT * FROM {oj a LEFT OUTER JOIN b ON a.id = b.id} WHERE a.x = 1"
        )
        assert result == "SELECT * FROM a LEFT OUTER JOIN b ON a.id = b.id WHERE a.x = 1"

    def test_keyword_case_insensitive(self):
        assert translate("{OJ a RIGHT OUTER JOIN b ON a.id = b.id}") == (
            "a RIGHT OUTER JOIN b ON a.id = b.id"
        )

    def test_nested_escapes_are_not_translated(self):
        # The first '}' ends the outer join escape; the second is plain text.
        result = translate("{oj a LEFT OUTER JOIN b ON a.d = {d '2004-01-31'}}")
        assert result == "a LEFT OUTER JOIN b ON a.d = {d '2004-01-31'}"
