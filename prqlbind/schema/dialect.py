"""SQL dialects and targets understood by the PRQL compiler.

The host refers to a dialect by a symbolic tag (``postgres``, ``big_query``,
...).  :func:`resolve_dialect` maps that tag to a :class:`Dialect`, and
:class:`SqlTarget` turns the dialect into the target name the compiler
expects::

    from prqlbind.schema.dialect import SqlTarget, resolve_dialect

    target = SqlTarget(dialect=resolve_dialect("big_query"))
    assert target.name == "sql.bigquery"

    # No dialect: let the compiler pick its generic flavour.
    assert SqlTarget().name == "sql.any"

Adding a dialect is one new :class:`Dialect` member plus, when the host tag
differs from the canonical name, one entry in ``_HOST_TAGS``.
"""
from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

from prqlbind.errors import ConfigurationError

#: Prefix shared by every SQL target name.
SQL_TARGET_PREFIX = "sql"

#: Target name used when no dialect is given.
SQL_ANY_TARGET = f"{SQL_TARGET_PREFIX}.any"

#: Explicit "no dialect" tags; they resolve to ``Dialect.GENERIC``.
NULL_TAGS: frozenset[str] = frozenset({"nil", "default"})


class Dialect(str, enum.Enum):
    """SQL dialects the compiler can emit.

    Values are the compiler's own target suffixes (``sql.<value>``).
    """

    ANSI = "ansi"
    BIGQUERY = "bigquery"
    CLICKHOUSE = "clickhouse"
    DUCKDB = "duckdb"
    GENERIC = "generic"
    GLAREDB = "glaredb"
    MSSQL = "mssql"
    MYSQL = "mysql"
    ORACLE = "oracle"
    POSTGRES = "postgres"
    REDSHIFT = "redshift"
    SQLITE = "sqlite"
    SNOWFLAKE = "snowflake"

    @property
    def target_name(self) -> str:
        return f"{SQL_TARGET_PREFIX}.{self.value}"


# Host tags spelled differently from the canonical value.
_HOST_TAGS: dict[str, Dialect] = {
    "big_query": Dialect.BIGQUERY,
    "click_house": Dialect.CLICKHOUSE,
    "duck_db": Dialect.DUCKDB,
    "glare_db": Dialect.GLAREDB,
    "ms_sql": Dialect.MSSQL,
    "my_sql": Dialect.MYSQL,
}

#: Every recognised tag, canonical values included.
DIALECT_TAGS: dict[str, Dialect] = {
    **{dialect.value: dialect for dialect in Dialect},
    **_HOST_TAGS,
}


def resolve_dialect(tag: str | None) -> Dialect:
    """Map a host dialect tag to a :class:`Dialect`.

    Args:
        tag: The symbolic tag, or ``None`` when the host supplied none.

    Returns:
        The matching dialect; ``Dialect.GENERIC`` for ``None`` and the null
        tags.

    Raises:
        ConfigurationError: If ``tag`` is not a recognised dialect.
    """
    if tag is None or tag in NULL_TAGS:
        return Dialect.GENERIC
    dialect = DIALECT_TAGS.get(tag)
    if dialect is None:
        raise ConfigurationError(
            "target",
            f"unknown dialect {tag!r}; expected one of {sorted(DIALECT_TAGS)}",
            value=tag,
        )
    return dialect


class SqlTarget(BaseModel):
    """SQL output for a dialect, or for an unspecified dialect.

    Attributes:
        dialect: The dialect to emit; ``None`` leaves the choice to the
            compiler (``sql.any``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dialect: Dialect | None = None

    @property
    def name(self) -> str:
        """The compiler target name (``'sql.any'``, ``'sql.postgres'``, ...)."""
        if self.dialect is None:
            return SQL_ANY_TARGET
        return self.dialect.target_name

