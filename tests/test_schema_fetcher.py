"""
tests/test_schema_fetcher.py
----------------------------
Unit tests for core/schema_fetcher.py and core/table_creator.py using a
mocked connection factory.
Run with: python -m pytest tests/
"""
from __future__ import annotations

import re
from unittest.mock import MagicMock

import pytest

from core.database import DatabaseError
from core.schema_fetcher import fetch_create_table_sql
from core.table_creator import create_writer_table
from errors import ErrorKind, ExecutionError, ParseError, QueryError, ResolutionError
from models.connection_info import ConnectionInfo
from tests.samples import ORDERS_DDL

SOURCE = ConnectionInfo(
    jdbc_url="jdbc:mysql://src-db:3306/shop",
    username="reader",
    password="r-secret",
    tablename="orders",
)
DESTINATION = ConnectionInfo(
    jdbc_url="jdbc:mysql://dst-db:3306/warehouse",
    username="writer",
    password="w-secret",
    tablename="orders_copy",
)


class TestFetchCreateTableSql:
    def test_returns_second_column(self, connect: MagicMock, mock_db: MagicMock) -> None:
        assert fetch_create_table_sql(SOURCE, connect) == ORDERS_DDL
        connect.assert_called_once_with(SOURCE.jdbc_url, "reader", "r-secret")
        mock_db.execute.assert_called_once_with("SHOW CREATE TABLE orders")

    def test_connection_released(self, connect: MagicMock) -> None:
        fetch_create_table_sql(SOURCE, connect)
        connect.return_value.__exit__.assert_called_once()

    def test_unresolved_table_makes_no_call(self, connect: MagicMock) -> None:
        info = ConnectionInfo(jdbc_url=SOURCE.jdbc_url, tablename=None)
        with pytest.raises(ResolutionError) as exc_info:
            fetch_create_table_sql(info, connect)
        assert exc_info.value.kind is ErrorKind.RESOLUTION
        connect.assert_not_called()

    def test_empty_result_set(self, connect: MagicMock, mock_db: MagicMock) -> None:
        mock_db.fetchone.return_value = None
        with pytest.raises(QueryError, match="not retrievable"):
            fetch_create_table_sql(SOURCE, connect)

    def test_null_ddl_column(self, connect: MagicMock, mock_db: MagicMock) -> None:
        mock_db.fetchone.return_value = ("orders", None)
        with pytest.raises(QueryError):
            fetch_create_table_sql(SOURCE, connect)

    def test_query_failure_carries_context(self, connect: MagicMock, mock_db: MagicMock) -> None:
        cause = DatabaseError("Table 'shop.orders' doesn't exist")
        mock_db.execute.side_effect = cause
        with pytest.raises(QueryError) as exc_info:
            fetch_create_table_sql(SOURCE, connect)
        message = str(exc_info.value)
        assert "MySQL" in message
        assert "SHOW CREATE TABLE orders" in message
        assert "'orders'" in message
        assert exc_info.value.__cause__ is cause

    def test_query_failure_still_releases(self, connect: MagicMock, mock_db: MagicMock) -> None:
        mock_db.execute.side_effect = DatabaseError("boom")
        with pytest.raises(QueryError):
            fetch_create_table_sql(SOURCE, connect)
        connect.return_value.__exit__.assert_called_once()

    def test_connect_failure_is_query_error(self, connect: MagicMock) -> None:
        connect.return_value.__enter__.side_effect = DatabaseError("refused")
        with pytest.raises(QueryError):
            fetch_create_table_sql(SOURCE, connect)


class TestCreateWriterTable:
    def test_executes_rewritten_ddl(self, connect: MagicMock, mock_db: MagicMock) -> None:
        sql = create_writer_table(DESTINATION, "CREATE TABLE `orders` (id INT)", connect)
        assert sql == "CREATE TABLE  IF NOT EXISTS orders_copy (id INT)"
        connect.assert_called_once_with(DESTINATION.jdbc_url, "writer", "w-secret")
        mock_db.execute.assert_called_once_with(sql)
        mock_db.commit.assert_called_once()
        connect.return_value.__exit__.assert_called_once()

    def test_parse_error_before_connecting(self, connect: MagicMock) -> None:
        with pytest.raises(ParseError):
            create_writer_table(DESTINATION, "not ddl", connect)
        connect.assert_not_called()

    def test_execution_failure_carries_context(self, connect: MagicMock, mock_db: MagicMock) -> None:
        mock_db.execute.side_effect = DatabaseError("denied")
        with pytest.raises(ExecutionError) as exc_info:
            create_writer_table(DESTINATION, ORDERS_DDL, connect)
        message = str(exc_info.value)
        assert "IF NOT EXISTS orders_copy" in message
        assert "'orders_copy'" in message
        connect.return_value.__exit__.assert_called_once()

    def test_custom_rewriter(self, connect: MagicMock, mock_db: MagicMock) -> None:
        rewriter = MagicMock()
        rewriter.rewrite.return_value = "CREATE TABLE IF NOT EXISTS `orders_copy` (id INT)"
        create_writer_table(DESTINATION, ORDERS_DDL, connect, rewriter)
        rewriter.rewrite.assert_called_once_with(ORDERS_DDL, "orders_copy")
        mock_db.execute.assert_called_once_with(rewriter.rewrite.return_value)


class _FakeDestination:
    """In-memory stand-in for the writer database's DDL handling."""

    _CREATE = re.compile(r"CREATE\s+TABLE\s+(IF\s+NOT\s+EXISTS\s+)?(`?\w+`?)", re.IGNORECASE)

    def __init__(self) -> None:
        self.tables: list[str] = []

    def execute(self, sql: str) -> None:
        match = self._CREATE.search(sql)
        guarded, name = bool(match.group(1)), match.group(2).strip("`")
        if name in self.tables:
            if guarded:
                return
            raise DatabaseError(f"Table '{name}' already exists")
        self.tables.append(name)

    def commit(self) -> None:
        pass


class TestIdempotentCreate:
    def test_second_run_is_noop(self) -> None:
        destination = _FakeDestination()
        factory = MagicMock()
        factory.return_value.__enter__.return_value = destination
        factory.return_value.__exit__.return_value = False

        first = create_writer_table(DESTINATION, ORDERS_DDL, factory)
        second = create_writer_table(DESTINATION, ORDERS_DDL, factory)

        assert first == second
        assert destination.tables == ["orders_copy"]
