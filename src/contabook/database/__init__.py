"""Database layer for contabook application."""

from contabook.database.base import Database
from contabook.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
