"""Journal domain service."""

from datetime import date
from typing import TYPE_CHECKING, Optional

from contabook.domain.entities import JournalEntry, VoucherType
from contabook.domain.errors import NotFoundError, journal_entry_not_found

if TYPE_CHECKING:
    from contabook.database.base import Database


class JournalService:
    """Service for reading stored journal entries."""

    def __init__(self, db: "Database"):
        """Initialize journal service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_entry(self, entry_id: int) -> JournalEntry:
        """Get a journal entry by ID.

        Raises:
            NotFoundError: If the entry does not exist
        """
        entry = self.db.get_journal_entry(entry_id)
        if entry is None:
            raise NotFoundError(journal_entry_not_found(entry_id))
        return entry

    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        voucher_type: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[JournalEntry]:
        """List journal entries.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            voucher_type: Optional voucher type name (unknown names map to TRASPASO)
            search: Optional text matched, case-insensitively, against the gloss
                and each line's account code, account name, RUT and name
        """
        parsed_type = VoucherType.parse(voucher_type) if voucher_type else None
        entries = self.db.list_journal_entries(
            start_date=start_date, end_date=end_date, voucher_type=parsed_type
        )
        term = search.strip().casefold() if search else ""
        if not term:
            return entries
        return [entry for entry in entries if _matches(entry, term)]


def _matches(entry: JournalEntry, term: str) -> bool:
    fields = [entry.gloss]
    for line in entry.lines:
        fields.extend(
            (line.account_code, line.account_name, line.third_party_tax_id, line.third_party_name)
        )
    return any(term in field.casefold() for field in fields if field)
