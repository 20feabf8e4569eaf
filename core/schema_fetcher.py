"""
core/schema_fetcher.py
----------------------
Reads a table's DDL from the source database with ``SHOW CREATE TABLE``.
"""
from __future__ import annotations

from typing import Callable

from core.database import DatabaseError, DatabaseManager
from errors import QueryError, ResolutionError, describe_sql_failure
from logger import get_logger
from models.connection_info import ConnectionInfo

log = get_logger(__name__)

DIALECT = "MySQL"

# (jdbc_url, username, password) -> unopened DatabaseManager
ConnectionFactory = Callable[..., DatabaseManager]


def fetch_create_table_sql(info: ConnectionInfo, connect: ConnectionFactory) -> str:
    """
    Return the DDL the source database reports for ``info.tablename``.

    The DDL is the second column of the first result row.

    Raises:
        ResolutionError: If no source table name was resolved.
        QueryError: If the query fails or returns no DDL.
    """
    if info.tablename is None:
        raise ResolutionError(
            "Cannot resolve the reader table: configure connection[0].table "
            "or a querySql with a FROM clause."
        )

    sql = f"SHOW CREATE TABLE {info.tablename}"
    try:
        with connect(info.jdbc_url, info.username, info.password) as db:
            db.execute(sql)
            row = db.fetchone()
    except DatabaseError as exc:
        raise QueryError(describe_sql_failure(DIALECT, sql, info.tablename, exc)) from exc

    ddl = row[1] if row is not None and len(row) > 1 else None
    if ddl is None:
        raise QueryError(f"Reader DDL not retrievable for table '{info.tablename}'.")

    log.info("Reader DDL: %s", ddl)
    return ddl
