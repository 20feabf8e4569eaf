"""
models/connection_info.py
-------------------------
Connection details resolved from one side (reader or writer) of a job.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionInfo:
    """
    Endpoint, credentials and table for one database side.

    Attributes:
        jdbc_url:  JDBC-style endpoint, e.g. ``jdbc:mysql://db:3306/shop``.
        username:  May be empty depending on the auth mode.
        password:  May be empty depending on the auth mode.
        tablename: Resolved table identifier; ``None`` when nothing could
                   be resolved.
    """
    jdbc_url: str | None
    username: str | None = None
    password: str | None = None
    tablename: str | None = None

    def __repr__(self) -> str:
        # Keep passwords out of logs and tracebacks.
        return (
            f"ConnectionInfo(jdbc_url={self.jdbc_url!r}, username={self.username!r}, "
            f"password={'***' if self.password else self.password!r}, "
            f"tablename={self.tablename!r})"
        )
