"""
tests/samples.py
----------------
Sample job configuration trees and DDL shared by the test modules.
"""
from __future__ import annotations

from typing import Any

ORDERS_DDL = (
    "CREATE TABLE `orders` (\n"
    "  `id` int NOT NULL AUTO_INCREMENT,\n"
    "  `amount` decimal(10,2) DEFAULT NULL,\n"
    "  PRIMARY KEY (`id`)\n"
    ") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"
)


def reader_dict(**overrides: Any) -> dict[str, Any]:
    conf: dict[str, Any] = {
        "username": "reader",
        "password": "r-secret",
        "connection": [
            {
                "jdbcUrl": ["jdbc:mysql://src-db:3306/shop"],
                "table": ["orders"],
            }
        ],
    }
    conf.update(overrides)
    return conf


def writer_dict(**overrides: Any) -> dict[str, Any]:
    conf: dict[str, Any] = {
        "autoCreateTable": True,
        "username": "writer",
        "password": "w-secret",
        "connection": [
            {
                "jdbcUrl": "jdbc:mysql://dst-db:3306/warehouse",
                "table": ["orders_copy"],
            }
        ],
    }
    conf.update(overrides)
    return conf
