"""
core/auto_create.py
-------------------
Auto-create orchestration: copy the reader table's structure to the
writer side when the writer job sets ``autoCreateTable``.

Design Decisions:
    * The flow is one blocking call with at most two sequential round-trips
      (reader ``SHOW CREATE TABLE``, writer ``CREATE TABLE IF NOT EXISTS``),
      each on its own short-lived connection.
    * Every check that can fail without the network (flag, table count,
      writer resolution, dialect, source table resolution) runs before the
      first connection opens.
    * The connection factory and the DDL rewriter are injected so tests
      can substitute mocks and a stricter parser can be plugged in later.

Example::

    creator = AutoCreateTable()
    created = creator.run(reader_conf, writer_conf)
"""
from __future__ import annotations

from core.database import DatabaseManager
from core.ddl_rewriter import DDLRewriter
from core.schema_fetcher import ConnectionFactory, fetch_create_table_sql
from core.source_resolver import (
    check_source_dialect,
    resolve_reader_connection,
    resolve_writer_connection,
)
from core.table_count import is_auto_create_enabled, validate_table_count
from core.table_creator import create_writer_table
from logger import get_logger
from models.configuration import Configuration

log = get_logger(__name__)


class AutoCreateTable:
    """
    Creates the writer table from the reader table's DDL.

    Args:
        connect:  Factory ``(jdbc_url, username, password)`` returning an
                  unopened :class:`DatabaseManager`. Defaults to
                  :meth:`DatabaseManager.from_jdbc_url`.
        rewriter: DDL rewriter; defaults to :class:`DDLRewriter`.
    """

    def __init__(
        self,
        connect: ConnectionFactory | None = None,
        rewriter: DDLRewriter | None = None,
    ) -> None:
        self._connect = connect or DatabaseManager.from_jdbc_url
        self._rewriter = rewriter or DDLRewriter()

    def run(self, reader_conf: Configuration, writer_conf: Configuration) -> bool:
        """
        Execute the auto-create flow.

        Returns:
            False when auto-create is disabled (nothing was done), True once
            the writer statement has run.

        Raises:
            AutoCreateTableError: Any subclass; the flow stops at the first
                failure.
        """
        if not is_auto_create_enabled(writer_conf):
            log.debug("autoCreateTable is off; skipping.")
            return False

        validate_table_count(writer_conf)
        writer_info = resolve_writer_connection(writer_conf)

        reader_info = resolve_reader_connection(reader_conf)
        check_source_dialect(reader_info)
        log.info("Auto-create: reading DDL of reader table %s", reader_info.tablename)

        reader_ddl = fetch_create_table_sql(reader_info, self._connect)

        create_writer_table(writer_info, reader_ddl, self._connect, self._rewriter)
        log.info("Auto-create finished for writer table %s", writer_info.tablename)
        return True


def create_table(
    reader_conf: Configuration,
    writer_conf: Configuration,
    connect: ConnectionFactory | None = None,
    rewriter: DDLRewriter | None = None,
) -> bool:
    """Convenience wrapper around :meth:`AutoCreateTable.run`."""
    return AutoCreateTable(connect=connect, rewriter=rewriter).run(reader_conf, writer_conf)
