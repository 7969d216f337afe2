"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


class StructuralError(DomainError):
    """An import source is unreadable, empty or lacks the expected sheet."""


def journal_entry_not_found(entry_id: int) -> str:
    """Return message for missing journal entry."""
    return f"Journal entry {entry_id} not found"


def source_file_not_found(path: str) -> str:
    """Return message for a missing import file."""
    return f"File not found: {path}"


def unsupported_source(path: str) -> str:
    """Return message for a file type the reader cannot open."""
    return f"Unsupported file type '{path}': expected .xlsx, .xlsm or .csv"


def sheet_not_found(sheet: str, available: list[str]) -> str:
    """Return message for a worksheet missing from a workbook."""
    return f"Worksheet '{sheet}' not found (available: {', '.join(available)})"


def empty_source(path: str, sheet: str | None = None) -> str:
    """Return message for a source without data rows."""
    if sheet:
        return f"No data rows in worksheet '{sheet}' of {path}"
    return f"No data rows in {path}"


def invalid_period(month: int) -> str:
    """Return message for a month outside 1..12."""
    return f"Invalid month {month}: expected a value between 1 and 12"
