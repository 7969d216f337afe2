"""Runtime configuration read from the environment."""

import os
from datetime import date
from pathlib import Path
from typing import Optional

DB_PATH_ENV = "CONTABOOK_DB_PATH"
FALLBACK_YEAR_ENV = "CONTABOOK_FALLBACK_YEAR"

# Year used when a spreadsheet date cell is blank or unreadable.
DEFAULT_FALLBACK_YEAR = 2023


def get_database_path(database_path: Optional[str] = None) -> str:
    """Resolve the SQLite database file path.

    Args:
        database_path: Explicit path. If None, checks CONTABOOK_DB_PATH
            environment variable, then defaults to ~/.contabook/contabook.db

    Returns:
        Path to the database file
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = Path.home() / ".contabook"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "contabook.db")

    return database_path


def get_fallback_year(year: Optional[int] = None) -> int:
    """Resolve the fallback year, ignoring malformed environment values."""
    if year is not None:
        return year
    raw = os.environ.get(FALLBACK_YEAR_ENV)
    if raw:
        try:
            return int(raw)
        except ValueError:
            pass
    return DEFAULT_FALLBACK_YEAR


def get_fallback_date(year: Optional[int] = None) -> date:
    """Return the date assigned to rows whose date cell cannot be read."""
    return date(get_fallback_year(year), 1, 1)
