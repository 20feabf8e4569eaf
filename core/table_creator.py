"""
core/table_creator.py
---------------------
Runs the rewritten DDL against the destination database.
"""
from __future__ import annotations

from core.database import DatabaseError
from core.ddl_rewriter import DDLRewriter
from core.schema_fetcher import DIALECT, ConnectionFactory
from errors import ExecutionError, describe_sql_failure
from logger import get_logger
from models.connection_info import ConnectionInfo

log = get_logger(__name__)


def create_writer_table(
    info: ConnectionInfo,
    reader_ddl: str,
    connect: ConnectionFactory,
    rewriter: DDLRewriter | None = None,
) -> str:
    """
    Create the destination table from the reader's DDL unless it exists.

    Returns:
        The statement that was executed.

    Raises:
        ParseError: If *reader_ddl* has no recognisable table name; nothing
            is sent to the destination in that case.
        ExecutionError: If the destination rejects the statement.
    """
    rewriter = rewriter or DDLRewriter()
    writer_ddl = rewriter.rewrite(reader_ddl, info.tablename)
    log.info("Writer DDL: %s", writer_ddl)

    try:
        with connect(info.jdbc_url, info.username, info.password) as db:
            db.execute(writer_ddl)
            db.commit()
    except DatabaseError as exc:
        raise ExecutionError(
            describe_sql_failure(DIALECT, writer_ddl, info.tablename, exc)
        ) from exc
    return writer_ddl
