"""
core/ddl_rewriter.py
--------------------
Textual rewriting of ``SHOW CREATE TABLE`` output.

Design Decisions:
    * No DDL grammar. Only one token matters: the table identifier right
      after ``CREATE TABLE``. It is located with a regex and substituted
      once, which keeps the rest of the statement byte-for-byte intact.
    * The substitution replaces the *first occurrence* of the identifier
      text anywhere in the statement. If that text also appears earlier,
      e.g. a bare one-letter identifier that occurs inside ``CREATE``, the
      wrong spot is rewritten. Tests pin this behaviour.
    * Patterns are compiled once at import and never change.
    * :class:`DDLRewriter` is the seam a stricter parser can replace; the
      orchestrator takes any object with the same two methods.
"""
from __future__ import annotations

import re

from errors import ParseError

CREATE_TABLE_RE = re.compile(r"\s*CREATE\s+TABLE\s+(`?\w+`?)\s+", re.IGNORECASE)
QUERY_FROM_RE = re.compile(r"FROM\s+(`?\w+`?)", re.IGNORECASE)

IF_NOT_EXISTS = " IF NOT EXISTS "


def find_query_table(query: str | None) -> str | None:
    """
    Return the first identifier following ``FROM`` in *query*.

    Backticks are kept when present.

    Example::

        find_query_table("SELECT a,b FROM `orders` WHERE a>1")  # "`orders`"
    """
    if not query:
        return None
    match = QUERY_FROM_RE.search(query)
    return match.group(1) if match else None


class DDLRewriter:
    """Turns source DDL into an idempotent create for another table name."""

    def table_identifier(self, ddl: str) -> str:
        """
        Return the identifier of the table a ``CREATE TABLE`` statement defines.

        Raises:
            ParseError: If *ddl* does not start with ``CREATE TABLE <identifier>``.
        """
        match = CREATE_TABLE_RE.match(ddl or "")
        if not match:
            raise ParseError(
                f"Table name not found in DDL: {(ddl or '')[:200]!r}"
            )
        return match.group(1)

    def rewrite(self, ddl: str, destination_table: str) -> str:
        """
        Retarget *ddl* at *destination_table* behind an existence guard.

        Example::

            DDLRewriter().rewrite("CREATE TABLE `orders` (id INT)", "orders_copy")
            # "CREATE TABLE  IF NOT EXISTS orders_copy (id INT)"
        """
        identifier = self.table_identifier(ddl)
        return ddl.replace(identifier, IF_NOT_EXISTS + destination_table, 1)
