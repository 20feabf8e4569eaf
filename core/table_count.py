"""
core/table_count.py
-------------------
Gatekeeping for auto-create: the flag, and the "exactly one destination
table" rule across every writer connection block.
"""
from __future__ import annotations

from core.keys import AUTO_CREATE_TABLE, CONN_MARK, TABLE
from core.source_resolver import block_jdbc_url, block_tables
from errors import ConfigurationError
from logger import get_logger
from models.configuration import Configuration

log = get_logger(__name__)


def is_auto_create_enabled(writer_conf: Configuration) -> bool:
    """Return True when the writer asks for its table to be created."""
    return writer_conf.get_bool(AUTO_CREATE_TABLE, False)


def count_writer_tables(writer_conf: Configuration) -> int:
    """
    Count concrete destination tables across all connection blocks.

    Raises:
        ConfigurationError: If there are no connection blocks, a block lacks
            a jdbcUrl or table list, or a table list expands to nothing.
    """
    connections = writer_conf.get_configuration_list(CONN_MARK)
    if not connections:
        raise ConfigurationError(
            "No writer connection configured; auto-create needs one destination table."
        )

    total = 0
    for index, conn_conf in enumerate(connections):
        if block_jdbc_url(conn_conf) is None:
            raise ConfigurationError(
                f"Writer connection[{index}] has no jdbcUrl configured."
            )

        tables = conn_conf.get_list(TABLE)
        if not tables:
            raise ConfigurationError(
                f"Writer connection[{index}] has no table configured."
            )

        expanded = block_tables(conn_conf)
        if not expanded:
            raise ConfigurationError(
                f"Writer connection[{index}] table configuration {tables!r} "
                "does not name any table."
            )
        log.debug("Writer connection[%d] expands to %d table(s).", index, len(expanded))
        total += len(expanded)
    return total


def validate_table_count(writer_conf: Configuration) -> None:
    """
    Require exactly one destination table.

    Raises:
        ConfigurationError: When the expanded count is not 1.
    """
    total = count_writer_tables(writer_conf)
    if total != 1:
        raise ConfigurationError(
            f"Auto-create supports exactly one writer table, but {total} are configured."
        )
