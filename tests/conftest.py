"""
tests/conftest.py
-----------------
Shared fixtures: job configuration trees and a mocked connection factory.
No live MySQL is needed.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from models.configuration import Configuration
from tests.samples import ORDERS_DDL, reader_dict, writer_dict


@pytest.fixture
def reader_conf() -> Configuration:
    return Configuration.from_dict(reader_dict())


@pytest.fixture
def writer_conf() -> Configuration:
    return Configuration.from_dict(writer_dict())


@pytest.fixture
def mock_db() -> MagicMock:
    db = MagicMock()
    db.fetchone.return_value = ("orders", ORDERS_DDL)
    return db


@pytest.fixture
def connect(mock_db: MagicMock) -> MagicMock:
    """Connection factory whose managers all hand out ``mock_db``."""
    factory = MagicMock()
    manager = factory.return_value
    manager.__enter__.return_value = mock_db
    manager.__exit__.return_value = False
    return factory
