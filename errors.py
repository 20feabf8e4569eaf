"""
errors.py
---------
Structured errors raised by the auto-create-table flow.

Every failure carries an :class:`ErrorKind` plus a human-readable message.
None of them are retried; they propagate straight to the invoking pipeline
stage.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of an auto-create failure."""
    CONFIGURATION = "configuration"
    RESOLUTION = "resolution"
    QUERY = "query"
    PARSE = "parse"
    EXECUTION = "execution"


class AutoCreateTableError(Exception):
    """Base error for the auto-create-table flow."""

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"[{self.kind.name}] {self.message}"


class ConfigurationError(AutoCreateTableError):
    """Missing/blank values, ambiguous table count or unsupported dialect."""
    kind = ErrorKind.CONFIGURATION


class ResolutionError(AutoCreateTableError):
    """The source table name could not be resolved."""
    kind = ErrorKind.RESOLUTION


class QueryError(AutoCreateTableError):
    """Source DDL retrieval failed or returned nothing usable."""
    kind = ErrorKind.QUERY


class ParseError(AutoCreateTableError):
    """DDL text does not have the ``CREATE TABLE <identifier>`` shape."""
    kind = ErrorKind.PARSE


class ExecutionError(AutoCreateTableError):
    """The destination DDL statement failed."""
    kind = ErrorKind.EXECUTION


def describe_sql_failure(
    dialect: str, sql: str, table: str | None, cause: BaseException
) -> str:
    """Build the diagnostic text shared by query and execution errors."""
    return (
        f"{dialect} statement failed for table '{table}': {cause} "
        f"| SQL: {sql}"
    )
