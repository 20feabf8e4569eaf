"""
core/table_expand.py
--------------------
Expansion of sharded table naming into concrete table names.

Supported forms (entries may also be comma separated)::

    orders                 -> ["orders"]
    orders_a, orders_b     -> ["orders_a", "orders_b"]
    orders_[0-3]           -> ["orders_0", "orders_1", "orders_2", "orders_3"]
    orders_[00-02]_bak     -> ["orders_00_bak", "orders_01_bak", "orders_02_bak"]

A range with a leading zero in its start bound is zero-padded to the width
of that bound. Reversed bounds are swapped.
"""
from __future__ import annotations

import re
from typing import Iterable

_RANGE_RE = re.compile(r"(\w+)\[(\d+)-(\d+)\](.*)")


def split_tables(tables: str) -> list[str]:
    """Expand one configured entry into concrete table names."""
    result: list[str] = []
    for piece in tables.split(","):
        piece = piece.strip()
        if not piece:
            continue
        match = _RANGE_RE.fullmatch(piece)
        if not match:
            result.append(piece)
            continue

        prefix, start, end, suffix = match.groups()
        prefix = prefix.strip()
        suffix = suffix.strip()
        if int(start) > int(end):
            start, end = end, start
        width = len(start)
        pad = start.startswith("0")
        for n in range(int(start), int(end) + 1):
            number = f"{n:0{width}d}" if pad else str(n)
            result.append(f"{prefix}{number}{suffix}")
    return result


def expand_table_conf(tables: Iterable[str]) -> list[str]:
    """
    Expand every configured table entry.

    Args:
        tables: Raw ``table`` list from a connection block.

    Returns:
        Flat list of concrete table names (possibly empty).
    """
    expanded: list[str] = []
    for table in tables:
        expanded.extend(split_tables(str(table)))
    return expanded
