"""models/__init__.py"""
from models.configuration import Configuration
from models.connection_info import ConnectionInfo

__all__ = [
    "Configuration",
    "ConnectionInfo",
]
