"""Spreadsheet row normalization.

Maps loosely labelled spreadsheet rows onto canonical records. Every logical
field has an ordered tuple of accepted column labels; labels are compared
after :func:`normalize_label` so trailing spaces, casing, accents and
``_``/``.`` separators do not matter. The first alias holding a non-blank
value wins.

Normalization never raises. A malformed cell degrades to the field's
default (``""``, ``0``, ``None`` or the fallback date) and is logged at
DEBUG level so a bulk import can still be audited afterwards.
"""

import re
import unicodedata
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from contabook.config import get_fallback_date
from contabook.domain.entities import (
    ZERO,
    AccountingLine,
    LedgerRow,
    PurchaseRecord,
    RawRow,
    SaleRecord,
    VoucherType,
)
from contabook.logging_config import get_logger
from contabook.utils.amount_parser import parse_amount_or_default
from contabook.utils.date_parser import parse_sheet_date

logger = get_logger(__name__)

LEDGER_COLUMNS: dict[str, tuple[str, ...]] = {
    "voucher_type": ("TIPO COMP", "voucher_type"),
    "voucher_number": ("N. COMP", "N COMP", "voucher_number"),
    "entry_date": ("FECHA", "entry_date"),
    "gloss": ("GLOSA", "gloss"),
    "account_code": ("CODIGO", "account_code"),
    "account_name": ("CTA DESCRIPCION", "account_name"),
    "debit": ("DEBE", "debit"),
    "credit": ("HABER", "credit"),
    "control": ("CONTROL", "control"),
    "compensation": ("COMPENSACION", "compensation"),
    "third_party_tax_id": ("RUT", "third_party_tax_id"),
    "third_party_name": ("NOMBRE", "third_party_name"),
    "document_type": ("TIPO DOC", "document_type"),
    "document_number": ("N. DOC", "N DOC", "document_number"),
}

_BOOK_COLUMNS: dict[str, tuple[str, ...]] = {
    "month": ("Mes", "month"),
    "line_number": ("Nro", "line_number"),
    "document_type": ("Tipo Doc", "document_type"),
    "counterparty_name": ("Razon Social", "counterparty_name"),
    "folio": ("Folio", "folio"),
    "document_date": ("Fecha Docto", "document_date"),
    "exempt_amount": ("Monto Exento", "exempt_amount"),
    "net_amount": ("Monto Neto", "net_amount"),
    "total_amount": ("Monto Total", "total_amount"),
}

PURCHASE_COLUMNS: dict[str, tuple[str, ...]] = {
    **_BOOK_COLUMNS,
    "purchase_type": ("Tipo Compra", "purchase_type"),
    "counterparty_tax_id": ("RUT Proveedor", "counterparty_tax_id"),
    "vat_amount": ("Monto IVA Recuperable", "Monto IVA", "vat_amount"),
    "fixed_asset_amount": ("Monto Neto Activo Fijo", "fixed_asset_amount"),
    "non_recoverable_vat": ("Monto Iva No Recuperable", "non_recoverable_vat"),
    "reception_date": ("Fecha Recepcion", "reception_date"),
    "acknowledgment_date": ("Fecha Acuse", "acknowledgment_date"),
}

SALE_COLUMNS: dict[str, tuple[str, ...]] = {
    **_BOOK_COLUMNS,
    "sale_type": ("Tipo Venta", "sale_type"),
    "counterparty_tax_id": ("Rut cliente", "RUT", "counterparty_tax_id"),
    "vat_amount": ("Monto IVA", "vat_amount"),
}

_SEPARATORS = re.compile(r"[._\s]+")


def normalize_label(label: Any) -> str:
    """Canonical form of a column label: "  Cta_Descripción " -> "CTA DESCRIPCION"."""
    text = unicodedata.normalize("NFKD", str(label))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return _SEPARATORS.sub(" ", text).strip().upper()


class _Row:
    """Alias-aware view over one raw row."""

    def __init__(self, row: RawRow, columns: dict[str, tuple[str, ...]]):
        self.columns = columns
        # Labels that normalize alike ("CODIGO", "CODIGO ") keep every value in column order
        self.cells: dict[str, list[Any]] = {}
        for label, value in row.items():
            self.cells.setdefault(normalize_label(label), []).append(value)

    def get(self, field_name: str) -> Any:
        for alias in self.columns[field_name]:
            for value in self.cells.get(normalize_label(alias), ()):
                if not _is_blank(value):
                    return value
        return None

    def text(self, field_name: str) -> str:
        value = self.get(field_name)
        return "" if value is None else _cell_text(value)

    def optional_text(self, field_name: str) -> Optional[str]:
        return self.text(field_name) or None

    def amount(self, field_name: str) -> Decimal:
        value = self.get(field_name)
        amount = parse_amount_or_default(value, ZERO)
        if value is not None and amount == ZERO and _looks_malformed(value):
            logger.debug("Unparseable %s %r defaulted to 0", field_name, value)
        return amount

    def optional_amount(self, field_name: str) -> Optional[Decimal]:
        value = self.get(field_name)
        amount = parse_amount_or_default(value, None)
        if value is not None and amount is None:
            logger.debug("Unparseable %s %r defaulted to None", field_name, value)
        return amount

    def non_negative_amount(self, field_name: str) -> Decimal:
        amount = self.amount(field_name)
        if amount < ZERO:
            logger.debug("Negative %s %s clamped to 0", field_name, amount)
            return ZERO
        return amount

    def date(self, field_name: str, fallback: date) -> date:
        value = self.get(field_name)
        parsed = parse_sheet_date(value, fallback)
        if value is not None and parsed == fallback:
            logger.debug("Unparseable %s %r defaulted to %s", field_name, value, fallback)
        return parsed

    def optional_date(self, field_name: str) -> Optional[date]:
        value = self.get(field_name)
        if value is None:
            return None
        return parse_sheet_date(value, None)

    def integer(self, field_name: str) -> Optional[int]:
        amount = parse_amount_or_default(self.get(field_name), None)
        if amount is None or amount != amount.to_integral_value():
            return None
        return int(amount)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _looks_malformed(value: Any) -> bool:
    """True when a cell is not itself a zero."""
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return value != 0
    return parse_amount_or_default(value, None) is None


def _cell_text(value: Any) -> str:
    # Spreadsheets hand integral numbers back as floats: 1234.0 -> "1234"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _fallback(fallback_date: Optional[date]) -> date:
    return fallback_date if fallback_date is not None else get_fallback_date()


def _line_from(row: _Row) -> AccountingLine:
    return AccountingLine(
        account_code=row.text("account_code"),
        account_name=row.text("account_name"),
        debit=row.non_negative_amount("debit"),
        credit=row.non_negative_amount("credit"),
        control=row.optional_amount("control"),
        compensation=row.optional_amount("compensation"),
        third_party_tax_id=row.optional_text("third_party_tax_id"),
        third_party_name=row.optional_text("third_party_name"),
        document_type=row.optional_text("document_type"),
        document_number=row.optional_text("document_number"),
    )


def normalize_line(row: RawRow) -> AccountingLine:
    """Normalize one ledger spreadsheet row into an accounting line.

    Args:
        row: Mapping of column label to cell value

    Returns:
        AccountingLine; missing or malformed cells take their defaults
    """
    return _line_from(_Row(row, LEDGER_COLUMNS))


def normalize_ledger_row(row: RawRow, fallback_date: Optional[date] = None) -> LedgerRow:
    """Normalize a ledger row, keeping the header fields used for grouping.

    Args:
        row: Mapping of column label to cell value
        fallback_date: Date for blank or unreadable FECHA cells. Defaults to
            1 January of the configured fallback year.

    Returns:
        LedgerRow carrying the voucher type, raw and parsed date, gloss and line
    """
    view = _Row(row, LEDGER_COLUMNS)
    raw_voucher = view.get("voucher_type")
    voucher_type = VoucherType.parse(raw_voucher)
    if raw_voucher is not None and voucher_type.value != str(raw_voucher).strip().upper():
        logger.debug("Unknown voucher type %r mapped to %s", raw_voucher, voucher_type.value)

    return LedgerRow(
        voucher_type=voucher_type,
        raw_date=view.get("entry_date"),
        entry_date=view.date("entry_date", _fallback(fallback_date)),
        gloss=view.text("gloss"),
        line=_line_from(view),
        voucher_number=view.optional_text("voucher_number"),
    )


def _book_fields(view: _Row, index: int, fallback: date) -> dict[str, Any]:
    document_date = view.date("document_date", fallback)
    month = view.integer("month")
    if month is None or not 1 <= month <= 12:
        month = document_date.month
    return dict(
        month=month,
        year=document_date.year,
        line_number=view.integer("line_number") or index + 1,
        document_type=view.optional_text("document_type"),
        counterparty_tax_id=view.optional_text("counterparty_tax_id"),
        counterparty_name=view.optional_text("counterparty_name"),
        folio=view.optional_text("folio"),
        document_date=document_date,
        net_amount=view.amount("net_amount"),
        vat_amount=view.amount("vat_amount"),
        total_amount=view.amount("total_amount"),
        exempt_amount=view.amount("exempt_amount"),
    )


def normalize_purchase(
    row: RawRow, index: int = 0, fallback_date: Optional[date] = None
) -> PurchaseRecord:
    """Normalize a purchase book row.

    Args:
        row: Mapping of column label to cell value
        index: Zero-based position of the row, used when Nro is missing
        fallback_date: Date for blank or unreadable document dates
    """
    view = _Row(row, PURCHASE_COLUMNS)
    return PurchaseRecord(
        **_book_fields(view, index, _fallback(fallback_date)),
        purchase_type=view.optional_text("purchase_type"),
        fixed_asset_amount=view.amount("fixed_asset_amount"),
        non_recoverable_vat=view.amount("non_recoverable_vat"),
        reception_date=view.optional_date("reception_date"),
        acknowledgment_date=view.optional_date("acknowledgment_date"),
    )


def normalize_sale(
    row: RawRow, index: int = 0, fallback_date: Optional[date] = None
) -> SaleRecord:
    """Normalize a sales book row.

    Args:
        row: Mapping of column label to cell value
        index: Zero-based position of the row, used when Nro is missing
        fallback_date: Date for blank or unreadable document dates
    """
    view = _Row(row, SALE_COLUMNS)
    return SaleRecord(
        **_book_fields(view, index, _fallback(fallback_date)),
        sale_type=view.optional_text("sale_type"),
    )
