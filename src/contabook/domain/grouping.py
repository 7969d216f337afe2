"""Fold normalized ledger rows into journal entries."""

from typing import Any, Callable, Hashable, Iterable

from contabook.domain.entities import AccountingLine, JournalEntry, LedgerRow

GroupKey = Callable[[LedgerRow], Hashable]


def _raw_date_key(raw_date: Any) -> Hashable:
    if isinstance(raw_date, str):
        return raw_date.strip()
    try:
        hash(raw_date)
    except TypeError:
        return repr(raw_date)
    return raw_date


def voucher_date_key(row: LedgerRow) -> Hashable:
    """Group by (voucher type, raw date cell).

    Distinct vouchers of the same type booked on the same day end up in one
    entry. Use :func:`voucher_number_key` when the sheet carries voucher numbers.
    """
    return (row.voucher_type, _raw_date_key(row.raw_date))


def voucher_number_key(row: LedgerRow) -> Hashable:
    """Group by (voucher type, raw date cell, voucher number)."""
    return (row.voucher_type, _raw_date_key(row.raw_date), row.voucher_number)


def group_entries(
    rows: Iterable[LedgerRow], key: GroupKey = voucher_date_key
) -> list[JournalEntry]:
    """Group ledger rows into journal entries.

    A single left-to-right pass. The header (voucher type, date, gloss) comes
    from the first row seen for a key; lines keep their arrival order. Entries
    are numbered 1..N in order of first appearance.

    Args:
        rows: Normalized ledger rows in sheet order
        key: Function computing the group key of a row

    Returns:
        List of journal entries; their line counts add up to the number of rows
    """
    headers: dict[Hashable, LedgerRow] = {}
    lines: dict[Hashable, list[AccountingLine]] = {}

    for row in rows:
        group = key(row)
        if group not in headers:
            headers[group] = row
            lines[group] = []
        lines[group].append(row.line)

    entries = []
    for number, (group, first) in enumerate(headers.items(), start=1):
        entries.append(
            JournalEntry(
                number=number,
                voucher_type=first.voucher_type,
                entry_date=first.entry_date,
                month=first.entry_date.month,
                year=first.entry_date.year,
                gloss=first.gloss,
                lines=tuple(lines[group]),
            )
        )
    return entries


def count_lines(entries: Iterable[JournalEntry]) -> int:
    """Total number of lines across entries."""
    return sum(len(entry.lines) for entry in entries)
