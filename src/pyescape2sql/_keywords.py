"""JDBC scalar function name -> Transact-SQL function name."""

from collections.abc import Mapping
from types import MappingProxyType

# "now" maps to an opaque marker token, not a function call.
FUNCTION_MAP: Mapping[str, str] = MappingProxyType({
    "user": "user_name",
    "database": "db_name",
    "ifnull": "isnull",
    "now": "translateDate",
    "atan2": "atn2",
    "length": "len",
    "locate": "charindex",
    "repeat": "replicate",
    "insert": "stuff",
    "lcase": "lower",
    "ucase": "upper",
})
