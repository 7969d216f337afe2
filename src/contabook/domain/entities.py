"""Domain model entities for contabook.

These are pure data classes representing bookkeeping concepts, independent of
database schema. Spreadsheet rows are normalized into them and the database
layer maps its ORM rows back into them.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

# One spreadsheet row: column label -> cell value.
RawRow = Mapping[str, Any]

ZERO = Decimal("0")


class VoucherType(str, Enum):
    """Origin of a journal entry."""

    TRASPASO = "TRASPASO"
    EGRESO = "EGRESO"
    INGRESO = "INGRESO"

    @classmethod
    def parse(cls, value: Any) -> "VoucherType":
        """Map a cell value to a voucher type, falling back to TRASPASO."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.TRASPASO
        text = str(value).strip().upper()
        if text in cls.__members__:
            return cls[text]
        return _VOUCHER_ALIASES.get(text, cls.TRASPASO)


_VOUCHER_ALIASES = {
    "TRANSFER": VoucherType.TRASPASO,
    "EXPENSE": VoucherType.EGRESO,
    "INCOME": VoucherType.INGRESO,
}


class SettlementStatus(str, Enum):
    """Presentation classification of a VAT settlement."""

    PENDING_PAYMENT = "pending payment"
    RECOVERABLE_CREDIT = "recoverable credit"


def classify(net_payable: Decimal) -> SettlementStatus:
    """Pending payment when nothing is owed back, recoverable credit otherwise."""
    if net_payable >= 0:
        return SettlementStatus.PENDING_PAYMENT
    return SettlementStatus.RECOVERABLE_CREDIT


@dataclass(frozen=True)
class AccountingLine:
    """One debit/credit line of a journal entry."""

    account_code: str
    account_name: str
    debit: Decimal
    credit: Decimal
    control: Optional[Decimal] = None
    compensation: Optional[Decimal] = None
    third_party_tax_id: Optional[str] = None
    third_party_name: Optional[str] = None
    document_type: Optional[str] = None
    document_number: Optional[str] = None


@dataclass(frozen=True)
class LedgerRow:
    """A normalized ledger spreadsheet row.

    ``raw_date`` keeps the untouched date cell; grouping keys on it so that
    rows sharing a cell value always share an entry even when the value could
    not be parsed and ``entry_date`` fell back to the default.
    """

    voucher_type: VoucherType
    raw_date: Any
    entry_date: date
    gloss: str
    line: AccountingLine
    voucher_number: Optional[str] = None


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry header with its ordered lines."""

    number: int
    voucher_type: VoucherType
    entry_date: date
    month: int
    year: int
    gloss: str
    lines: tuple[AccountingLine, ...] = ()
    id: Optional[int] = None

    @property
    def entry_code(self) -> str:
        """Display code such as JE-000001."""
        return f"JE-{self.number:06d}"

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit for line in self.lines), ZERO)

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit for line in self.lines), ZERO)

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


@dataclass(frozen=True)
class BookRecord:
    """Fields shared by purchase book and sales book rows."""

    month: int
    year: int
    line_number: int
    document_type: Optional[str]
    counterparty_tax_id: Optional[str]
    counterparty_name: Optional[str]
    folio: Optional[str]
    document_date: date
    net_amount: Decimal
    vat_amount: Decimal
    total_amount: Decimal
    exempt_amount: Decimal


@dataclass(frozen=True)
class PurchaseRecord(BookRecord):
    """Purchase book row. Its VAT is fiscal credit."""

    purchase_type: Optional[str] = None
    fixed_asset_amount: Decimal = ZERO
    non_recoverable_vat: Decimal = ZERO
    reception_date: Optional[date] = None
    acknowledgment_date: Optional[date] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class SaleRecord(BookRecord):
    """Sales book row. Its VAT is fiscal debit."""

    sale_type: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class VatSettlement:
    """VAT position for a period, derived from the purchase and sales books."""

    fiscal_debit: Decimal
    fiscal_credit: Decimal
    net_payable: Decimal
    taxable_sales: Decimal = ZERO
    taxable_purchases: Decimal = ZERO
    sales_count: int = 0
    purchases_count: int = 0

    @property
    def status(self) -> SettlementStatus:
        return classify(self.net_payable)


@dataclass(frozen=True)
class PeriodSettlement:
    """Settlement for one month, as listed in the settlement history."""

    month: int
    year: int
    settlement: VatSettlement

    @property
    def period(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
