"""Database factory functions for creating database instances."""

from typing import Optional

from contabook.config import get_database_path
from contabook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks CONTABOOK_DB_PATH
            environment variable, then defaults to ~/.contabook/contabook.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    database_path = get_database_path(database_path)
    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
