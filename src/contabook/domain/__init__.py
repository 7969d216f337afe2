"""Domain layer for contabook application."""

from contabook.domain.entities import (
    AccountingLine,
    JournalEntry,
    LedgerRow,
    PurchaseRecord,
    SaleRecord,
    SettlementStatus,
    VatSettlement,
    VoucherType,
)
from contabook.domain.normalizer import (
    normalize_line,
    normalize_ledger_row,
    normalize_purchase,
    normalize_sale,
)
from contabook.domain.grouping import group_entries
from contabook.domain.vat import compute_settlement

__all__ = [
    "AccountingLine",
    "JournalEntry",
    "LedgerRow",
    "PurchaseRecord",
    "SaleRecord",
    "SettlementStatus",
    "VatSettlement",
    "VoucherType",
    "normalize_line",
    "normalize_ledger_row",
    "normalize_purchase",
    "normalize_sale",
    "group_entries",
    "compute_settlement",
]
