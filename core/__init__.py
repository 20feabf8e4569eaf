"""core/__init__.py"""
from core.auto_create import AutoCreateTable, create_table
from core.database import DatabaseManager, DatabaseError, ConnectionLostError, parse_jdbc_url
from core.ddl_rewriter import DDLRewriter, find_query_table
from core.schema_fetcher import fetch_create_table_sql
from core.source_resolver import (
    check_source_dialect,
    resolve_reader_connection,
    resolve_writer_connection,
)
from core.table_count import count_writer_tables, is_auto_create_enabled, validate_table_count
from core.table_creator import create_writer_table
from core.table_expand import expand_table_conf

__all__ = [
    "AutoCreateTable",
    "create_table",
    "DatabaseManager",
    "DatabaseError",
    "ConnectionLostError",
    "parse_jdbc_url",
    "DDLRewriter",
    "find_query_table",
    "fetch_create_table_sql",
    "check_source_dialect",
    "resolve_reader_connection",
    "resolve_writer_connection",
    "count_writer_tables",
    "is_auto_create_enabled",
    "validate_table_count",
    "create_writer_table",
    "expand_table_conf",
]
