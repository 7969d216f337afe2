"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid circular import through domain services
from contabook.domain.entities import (
    JournalEntry,
    PurchaseRecord,
    SaleRecord,
    VoucherType,
)


class Database(ABC):
    """Abstract database interface for contabook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Journal operations
    @abstractmethod
    def create_journal_entry(self, entry: JournalEntry) -> int:
        """Store an entry with its lines in order. Returns entry ID."""
        pass

    @abstractmethod
    def count_journal_entries(self) -> int:
        """Number of stored journal entries."""
        pass

    @abstractmethod
    def get_journal_entry(self, entry_id: int) -> Optional[JournalEntry]:
        """Get journal entry with its lines by ID."""
        pass

    @abstractmethod
    def list_journal_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        voucher_type: Optional[VoucherType] = None,
    ) -> list[JournalEntry]:
        """List journal entries ordered by date and number.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            voucher_type: Optional voucher type filter
        """
        pass

    # Purchase and sales book operations
    @abstractmethod
    def insert_purchase_records(self, records: Sequence[PurchaseRecord]) -> int:
        """Store purchase book rows. Returns number stored."""
        pass

    @abstractmethod
    def insert_sale_records(self, records: Sequence[SaleRecord]) -> int:
        """Store sales book rows. Returns number stored."""
        pass

    @abstractmethod
    def list_purchase_records(
        self, month: Optional[int] = None, year: Optional[int] = None
    ) -> list[PurchaseRecord]:
        """List purchase book rows, optionally for one period."""
        pass

    @abstractmethod
    def list_sale_records(
        self, month: Optional[int] = None, year: Optional[int] = None
    ) -> list[SaleRecord]:
        """List sales book rows, optionally for one period."""
        pass

    @abstractmethod
    def list_book_periods(self, year: int) -> list[int]:
        """Months of ``year`` with purchase or sales book rows, ascending."""
        pass
