"""
core/source_resolver.py
-----------------------
Builds :class:`ConnectionInfo` for the reader (source) and writer
(destination) sides of a job.

Writer side: the first entry of the first connection block, read with the
same helpers the table count uses.

Source table precedence:
    1. ``connection[0].table[0]`` verbatim (bare or backtick-quoted).
    2. The first identifier after ``FROM`` in ``connection[0].querySql[0]``.
    3. ``None``; schema retrieval then fails with a resolution error.
"""
from __future__ import annotations

from core.ddl_rewriter import find_query_table
from core.keys import CONN_MARK, JDBC_URL, PASSWORD, QUERY_SQL, TABLE, USERNAME
from core.table_expand import expand_table_conf
from errors import ConfigurationError
from logger import get_logger
from models.configuration import Configuration
from models.connection_info import ConnectionInfo

log = get_logger(__name__)

MYSQL_FAMILY_MARKERS = ("mysql", "mariadb")


def resolve_reader_connection(reader_conf: Configuration) -> ConnectionInfo:
    """Resolve the source endpoint, credentials and table name."""
    first_table = reader_conf.get_string(f"{CONN_MARK}[0].{TABLE}[0]")
    tablename = first_table
    if tablename is None:
        query = reader_conf.get_string(f"{CONN_MARK}[0].{QUERY_SQL}[0]")
        tablename = find_query_table(query)
        log.debug("Reader table resolved from querySql: %s", tablename)

    return ConnectionInfo(
        jdbc_url=reader_conf.get_string(f"{CONN_MARK}[0].{JDBC_URL}[0]"),
        username=reader_conf.get_string(USERNAME),
        password=reader_conf.get_string(PASSWORD),
        tablename=tablename,
    )


def block_jdbc_url(conn_conf: Configuration) -> str | None:
    """
    Return a connection block's endpoint, or None when it is blank.

    A list-valued ``jdbcUrl`` contributes its first entry.
    """
    jdbc_url = conn_conf.get(JDBC_URL)
    if isinstance(jdbc_url, list):
        jdbc_url = jdbc_url[0] if jdbc_url else None
    if jdbc_url is None or isinstance(jdbc_url, (dict, list)):
        return None
    jdbc_url = str(jdbc_url)
    return jdbc_url if jdbc_url.strip() else None


def block_tables(conn_conf: Configuration) -> list[str]:
    """Return the concrete table names a connection block declares."""
    return expand_table_conf(conn_conf.get_list(TABLE, []))


def resolve_writer_connection(writer_conf: Configuration) -> ConnectionInfo:
    """
    Resolve the destination endpoint, credentials and table name.

    Reads the first connection block the same way the table count does.

    Raises:
        ConfigurationError: If the endpoint or the table cannot be resolved.
    """
    first_block = writer_conf.get_configuration(f"{CONN_MARK}[0]")
    if first_block is None:
        raise ConfigurationError("No writer connection configured.")

    jdbc_url = block_jdbc_url(first_block)
    if jdbc_url is None:
        raise ConfigurationError("Writer connection[0] has no jdbcUrl configured.")
    tables = block_tables(first_block)
    if not tables:
        raise ConfigurationError("Writer connection[0] has no table configured.")

    return ConnectionInfo(
        jdbc_url=jdbc_url,
        username=writer_conf.get_string(USERNAME),
        password=writer_conf.get_string(PASSWORD),
        tablename=tables[0],
    )


def check_source_dialect(info: ConnectionInfo) -> None:
    """
    Reject sources that are not MySQL-family before any network call.

    Raises:
        ConfigurationError: If the endpoint is blank or not MySQL-family.
    """
    if info.jdbc_url is None or not info.jdbc_url.strip():
        raise ConfigurationError("Reader connection[0] has no jdbcUrl configured.")
    url = info.jdbc_url.lower()
    if not any(marker in url for marker in MYSQL_FAMILY_MARKERS):
        raise ConfigurationError(
            f"Auto-create only supports MySQL to MySQL; reader endpoint "
            f"'{info.jdbc_url}' is not a MySQL-family database."
        )
