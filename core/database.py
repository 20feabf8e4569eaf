"""
core/database.py
----------------
MySQL connection handling for the auto-create flow.

Design Decisions:
    * ``DatabaseManager`` is a context manager so callers can use it with
      ``with`` statements and be guaranteed the cursor and connection are
      closed on exit, in that order, on success and on error alike.
    * Endpoints arrive as JDBC URLs (``jdbc:mysql://host:port/db?k=v``)
      because that is how job files describe them; ``parse_jdbc_url``
      turns them into mysql-connector keyword arguments.
    * One connection per call site. There is no pooling and no retry loop;
      a failed connect surfaces immediately as ``DatabaseError``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl, urlsplit

import mysql.connector
from mysql.connector import MySQLConnection
from mysql.connector.cursor import MySQLCursor

from config import CONFIG
from errors import ConfigurationError
from logger import get_logger

log = get_logger(__name__)

_JDBC_PREFIX = "jdbc:"
_SUPPORTED_SCHEMES = ("mysql", "mariadb")


class DatabaseError(Exception):
    """Raised for database-level failures reported by this module."""


class ConnectionLostError(DatabaseError):
    """Raised when an operation needs a connection that is not open."""


@dataclass(frozen=True)
class JdbcEndpoint:
    """Connection target parsed out of a JDBC URL."""
    host: str
    port: int
    database: str | None = None
    options: dict[str, str] = field(default_factory=dict)


def parse_jdbc_url(url: str) -> JdbcEndpoint:
    """
    Split a MySQL-family JDBC URL into its parts.

    Example::

        parse_jdbc_url("jdbc:mysql://10.0.0.5:3307/shop?useSSL=false")
        # JdbcEndpoint(host="10.0.0.5", port=3307, database="shop",
        #              options={"useSSL": "false"})

    Raises:
        ConfigurationError: If the URL is blank, not MySQL-family or has no host.
    """
    if not url or not url.strip():
        raise ConfigurationError("JDBC URL is blank.")
    raw = url.strip()
    if raw.lower().startswith(_JDBC_PREFIX):
        raw = raw[len(_JDBC_PREFIX):]

    parts = urlsplit(raw)
    if parts.scheme.lower() not in _SUPPORTED_SCHEMES:
        raise ConfigurationError(f"Unsupported JDBC URL scheme in '{url}'.")
    try:
        host = parts.hostname
        port = parts.port or CONFIG.db.default_port
    except ValueError as exc:
        raise ConfigurationError(f"Malformed JDBC URL '{url}': {exc}") from exc
    if not host:
        raise ConfigurationError(f"JDBC URL '{url}' has no host.")

    database = parts.path.lstrip("/") or None
    options = dict(parse_qsl(parts.query, keep_blank_values=True))
    return JdbcEndpoint(host=host, port=port, database=database, options=options)


class DatabaseManager:
    """
    Short-lived MySQL connection wrapper.

    Example::

        with DatabaseManager.from_jdbc_url(url, "root", "secret") as db:
            db.execute("SHOW CREATE TABLE orders")
            row = db.fetchone()
    """

    def __init__(
        self,
        host: str,
        port: int,
        user: str | None,
        password: str | None,
        database: str | None = None,
        charset: str = "utf8mb4",
        connect_timeout: int = 10,
    ) -> None:
        self._host = host
        self._port = port
        self._user = user
        self._password = password
        self._database = database
        self._charset = charset
        self._connect_timeout = connect_timeout

        self._conn: MySQLConnection | None = None
        self._cursor: MySQLCursor | None = None

    # ------------------------------------------------------------------
    # Factory helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_jdbc_url(
        cls, url: str, user: str | None, password: str | None
    ) -> "DatabaseManager":
        """Build a manager from a job's JDBC URL and credentials."""
        endpoint = parse_jdbc_url(url)
        timeout = endpoint.options.get("connectTimeout")
        return cls(
            host=endpoint.host,
            port=endpoint.port,
            user=user,
            password=password,
            database=endpoint.database,
            charset=_charset_from_options(endpoint.options) or CONFIG.db.charset,
            # JDBC expresses connectTimeout in milliseconds
            connect_timeout=(
                max(1, int(timeout) // 1000) if timeout and timeout.isdigit()
                else CONFIG.db.connect_timeout
            ),
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "DatabaseManager":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            log.warning("Unhandled exception in DatabaseManager context: %s", exc_val)
            self._safe_rollback()
        self.close()
        return False  # Never suppress exceptions

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> None:
        """
        Open the MySQL connection and a cursor.

        Raises:
            DatabaseError: If the connection cannot be established.
        """
        log.info("Connecting to MySQL at %s:%s", self._host, self._port)
        try:
            self._conn = mysql.connector.connect(
                host=self._host,
                port=self._port,
                user=self._user or "",
                password=self._password or "",
                database=self._database,
                charset=self._charset,
                connect_timeout=self._connect_timeout,
            )
            self._cursor = self._conn.cursor()
        except mysql.connector.Error as exc:
            self.close()
            raise DatabaseError(
                f"Could not connect to MySQL at {self._host}:{self._port}: {exc}"
            ) from exc
        log.info("Connected to MySQL successfully.")

    def close(self) -> None:
        """Close cursor then connection, logging any cleanup errors."""
        try:
            if self._cursor is not None:
                self._cursor.close()
        except mysql.connector.Error as exc:
            log.debug("Ignoring cursor close failure: %s", exc)
        try:
            if self._conn is not None and self._conn.is_connected():
                self._conn.close()
                log.info("Database connection closed.")
        except mysql.connector.Error as exc:
            log.debug("Ignoring connection close failure: %s", exc)
        self._cursor = None
        self._conn = None

    @property
    def is_connected(self) -> bool:
        return bool(self._conn and self._conn.is_connected())

    def _ensure_connected(self) -> None:
        if not self.is_connected:
            raise ConnectionLostError(
                "Database connection is not open. Call connect() first."
            )

    def _safe_rollback(self) -> None:
        try:
            if self._conn and self._conn.is_connected():
                self._conn.rollback()
                log.debug("Transaction rolled back.")
        except mysql.connector.Error as exc:
            log.warning("Rollback failed: %s", exc)

    # ------------------------------------------------------------------
    # Public query helpers
    # ------------------------------------------------------------------

    def execute(self, sql: str, params: tuple | None = None) -> MySQLCursor:
        """
        Execute a SQL statement and return the cursor.

        Raises:
            ConnectionLostError: If not connected.
            DatabaseError: On MySQL execution errors.
        """
        self._ensure_connected()
        assert self._cursor is not None
        try:
            self._cursor.execute(sql, params)
            return self._cursor
        except mysql.connector.Error as exc:
            log.error("SQL execution error: %s | SQL: %.500s", exc, sql)
            raise DatabaseError(str(exc)) from exc

    def fetchone(self) -> tuple | None:
        """Fetch one row from the last execute."""
        assert self._cursor is not None
        return self._cursor.fetchone()

    def commit(self) -> None:
        assert self._conn is not None
        try:
            self._conn.commit()
        except mysql.connector.Error as exc:
            raise DatabaseError(str(exc)) from exc


_JAVA_CHARSETS: dict[str, str] = {
    "utf-8": "utf8mb4",
    "utf8": "utf8mb4",
    "gbk": "gbk",
    "latin1": "latin1",
    "iso-8859-1": "latin1",
}


def _charset_from_options(options: dict[str, Any]) -> str | None:
    """Map a JDBC ``characterEncoding`` hint onto a MySQL charset name."""
    encoding = options.get("characterEncoding")
    if not encoding:
        return None
    return _JAVA_CHARSETS.get(str(encoding).lower())
