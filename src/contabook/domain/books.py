"""Purchase and sales book domain service."""

from typing import TYPE_CHECKING, Optional

from contabook.domain.entities import PurchaseRecord, SaleRecord
from contabook.domain.errors import ValidationError, invalid_period

if TYPE_CHECKING:
    from contabook.database.base import Database


class BookService:
    """Service for reading the purchase and sales books."""

    def __init__(self, db: "Database"):
        """Initialize book service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _check_month(month: Optional[int]) -> None:
        if month is not None and not 1 <= month <= 12:
            raise ValidationError(invalid_period(month))

    def list_purchases(
        self, month: Optional[int] = None, year: Optional[int] = None
    ) -> list[PurchaseRecord]:
        """List purchase book rows, optionally for one period."""
        self._check_month(month)
        return self.db.list_purchase_records(month=month, year=year)

    def list_sales(self, month: Optional[int] = None, year: Optional[int] = None) -> list[SaleRecord]:
        """List sales book rows, optionally for one period."""
        self._check_month(month)
        return self.db.list_sale_records(month=month, year=year)
