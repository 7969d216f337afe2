"""VAT (IVA) settlement.

Fiscal debit is the VAT charged on sales, fiscal credit the VAT paid on
purchases. Their difference is payable when positive and a recoverable
credit balance when negative.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from contabook.domain.entities import (
    ZERO,
    PeriodSettlement,
    PurchaseRecord,
    SaleRecord,
    VatSettlement,
    classify,
)
from contabook.domain.errors import ValidationError, invalid_period
from contabook.logging_config import get_logger
from contabook.utils.amount_parser import parse_amount_or_default

if TYPE_CHECKING:
    from contabook.database.base import Database

logger = get_logger(__name__)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _sum_field(records: Iterable[Any], name: str) -> tuple[Decimal, int]:
    total = ZERO
    count = 0
    for record in records:
        total += parse_amount_or_default(_field(record, name), ZERO)
        count += 1
    return total, count


def compute_settlement(
    sales: Optional[Iterable[Any]], purchases: Optional[Iterable[Any]]
) -> VatSettlement:
    """Compute the VAT settlement for already period-filtered book records.

    Records may be SaleRecord/PurchaseRecord instances or plain mappings; a
    missing or non-numeric ``vat_amount`` counts as zero. The result does not
    depend on record order.

    Args:
        sales: Sales book records (fiscal debit)
        purchases: Purchase book records (fiscal credit)

    Returns:
        VatSettlement with fiscal debit, fiscal credit and net payable
    """
    sales = list(sales or ())
    purchases = list(purchases or ())

    fiscal_debit, sales_count = _sum_field(sales, "vat_amount")
    fiscal_credit, purchases_count = _sum_field(purchases, "vat_amount")
    taxable_sales, _ = _sum_field(sales, "net_amount")
    taxable_purchases, _ = _sum_field(purchases, "net_amount")

    return VatSettlement(
        fiscal_debit=fiscal_debit,
        fiscal_credit=fiscal_credit,
        net_payable=fiscal_debit - fiscal_credit,
        taxable_sales=taxable_sales,
        taxable_purchases=taxable_purchases,
        sales_count=sales_count,
        purchases_count=purchases_count,
    )


class VatSettlementService:
    """Service computing settlements from the stored purchase and sales books."""

    def __init__(self, db: "Database"):
        """Initialize VAT settlement service.

        Args:
            db: Database instance
        """
        self.db = db

    def settle_period(self, month: int, year: int) -> VatSettlement:
        """Compute the settlement for one month.

        Raises:
            ValidationError: If month is not between 1 and 12
        """
        if not 1 <= month <= 12:
            raise ValidationError(invalid_period(month))

        sales: list[SaleRecord] = self.db.list_sale_records(month=month, year=year)
        purchases: list[PurchaseRecord] = self.db.list_purchase_records(month=month, year=year)
        settlement = compute_settlement(sales, purchases)
        logger.info(
            "Settled %04d-%02d: debit=%s credit=%s net=%s",
            year,
            month,
            settlement.fiscal_debit,
            settlement.fiscal_credit,
            settlement.net_payable,
        )
        return settlement

    def settlement_history(self, year: int) -> list[PeriodSettlement]:
        """Settlements for every month of ``year`` that has book records."""
        return [
            PeriodSettlement(month=month, year=year, settlement=self.settle_period(month, year))
            for month in self.db.list_book_periods(year)
        ]
