"""Native SQL dialect system for escape translation."""

import logging

from pyescape2sql.dialect._base import Dialect, DialectName
from pyescape2sql.dialect.sqlserver import SQLServerDialect, SybaseDialect

__all__ = [
    "Dialect",
    "DialectName",
    "SQLServerDialect",
    "SybaseDialect",
    "get_dialect",
]

logger = logging.getLogger("pyescape2sql.dialect")

_REGISTRY: dict[str, type[Dialect]] = {
    DialectName.SQLSERVER: SQLServerDialect,
    DialectName.SYBASE: SybaseDialect,
}


def get_dialect(name: str) -> Dialect:
    """Get a dialect instance by name.

    Args:
        name: Dialect name ("sqlserver" or "sybase").

    Returns:
        A Dialect instance.

    Raises:
        ValueError: If the dialect name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown dialect: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    logger.debug("resolved dialect %s to %s", name, cls.__name__)
    return cls()
