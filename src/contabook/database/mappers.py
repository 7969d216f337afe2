"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so table and column names (which
follow the accounting schema: supplier/customer, issue_date) can differ from
the domain vocabulary (counterparty, document_date).
"""

from contabook.domain import entities as domain
from contabook.database.models import (
    JournalEntry as ORMJournalEntry,
    JournalEntryLine as ORMJournalEntryLine,
    PurchaseBookRecord as ORMPurchaseBookRecord,
    SalesBookRecord as ORMSalesBookRecord,
)


def line_to_domain(orm_line: ORMJournalEntryLine) -> domain.AccountingLine:
    """Convert SQLAlchemy JournalEntryLine model to domain AccountingLine."""
    return domain.AccountingLine(
        account_code=orm_line.account_code,
        account_name=orm_line.account_name,
        debit=orm_line.debit,
        credit=orm_line.credit,
        control=orm_line.control,
        compensation=orm_line.compensation,
        third_party_tax_id=orm_line.third_party_tax_id,
        third_party_name=orm_line.third_party_name,
        document_type=orm_line.document_type,
        document_number=orm_line.document_number,
    )


def line_to_orm(line: domain.AccountingLine, line_order: int) -> ORMJournalEntryLine:
    """Build a SQLAlchemy JournalEntryLine from a domain AccountingLine."""
    return ORMJournalEntryLine(
        line_order=line_order,
        account_code=line.account_code,
        account_name=line.account_name,
        debit=line.debit,
        credit=line.credit,
        control=line.control,
        compensation=line.compensation,
        third_party_tax_id=line.third_party_tax_id,
        third_party_name=line.third_party_name,
        document_type=line.document_type,
        document_number=line.document_number,
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry."""
    return domain.JournalEntry(
        id=orm_entry.id,
        number=orm_entry.entry_number,
        voucher_type=domain.VoucherType.parse(orm_entry.entry_type),
        entry_date=orm_entry.entry_date,
        month=orm_entry.month,
        year=orm_entry.year,
        gloss=orm_entry.gloss,
        lines=tuple(line_to_domain(line) for line in orm_entry.lines),
    )


def journal_entry_to_orm(entry: domain.JournalEntry, number: int) -> ORMJournalEntry:
    """Build a SQLAlchemy JournalEntry (with lines) from a domain JournalEntry."""
    return ORMJournalEntry(
        entry_number=number,
        entry_code=f"JE-{number:06d}",
        entry_type=entry.voucher_type.value,
        entry_date=entry.entry_date,
        month=entry.month,
        year=entry.year,
        gloss=entry.gloss,
        status="POSTED",
        lines=[line_to_orm(line, order) for order, line in enumerate(entry.lines, start=1)],
    )


def purchase_to_domain(orm_record: ORMPurchaseBookRecord) -> domain.PurchaseRecord:
    """Convert SQLAlchemy PurchaseBookRecord model to domain PurchaseRecord."""
    return domain.PurchaseRecord(
        id=orm_record.id,
        month=orm_record.month,
        year=orm_record.year,
        line_number=orm_record.line_number,
        document_type=orm_record.document_type,
        counterparty_tax_id=orm_record.supplier_tax_id,
        counterparty_name=orm_record.supplier_name,
        folio=orm_record.folio,
        document_date=orm_record.document_date,
        net_amount=orm_record.net_amount,
        vat_amount=orm_record.vat_amount,
        total_amount=orm_record.total_amount,
        exempt_amount=orm_record.exempt_amount,
        purchase_type=orm_record.purchase_type,
        fixed_asset_amount=orm_record.fixed_asset_amount,
        non_recoverable_vat=orm_record.non_recoverable_vat,
        reception_date=orm_record.reception_date,
        acknowledgment_date=orm_record.acknowledgment_date,
    )


def purchase_to_orm(record: domain.PurchaseRecord) -> ORMPurchaseBookRecord:
    """Build a SQLAlchemy PurchaseBookRecord from a domain PurchaseRecord."""
    return ORMPurchaseBookRecord(
        month=record.month,
        year=record.year,
        line_number=record.line_number,
        document_type=record.document_type,
        purchase_type=record.purchase_type,
        supplier_tax_id=record.counterparty_tax_id,
        supplier_name=record.counterparty_name,
        folio=record.folio,
        document_date=record.document_date,
        reception_date=record.reception_date,
        acknowledgment_date=record.acknowledgment_date,
        exempt_amount=record.exempt_amount,
        net_amount=record.net_amount,
        vat_amount=record.vat_amount,
        fixed_asset_amount=record.fixed_asset_amount,
        non_recoverable_vat=record.non_recoverable_vat,
        total_amount=record.total_amount,
    )


def sale_to_domain(orm_record: ORMSalesBookRecord) -> domain.SaleRecord:
    """Convert SQLAlchemy SalesBookRecord model to domain SaleRecord."""
    return domain.SaleRecord(
        id=orm_record.id,
        month=orm_record.month,
        year=orm_record.year,
        line_number=orm_record.line_number,
        document_type=orm_record.document_type,
        counterparty_tax_id=orm_record.customer_tax_id,
        counterparty_name=orm_record.customer_name,
        folio=orm_record.folio,
        document_date=orm_record.issue_date,
        net_amount=orm_record.net_amount,
        vat_amount=orm_record.vat_amount,
        total_amount=orm_record.total_amount,
        exempt_amount=orm_record.exempt_amount,
        sale_type=orm_record.sale_type,
    )


def sale_to_orm(record: domain.SaleRecord) -> ORMSalesBookRecord:
    """Build a SQLAlchemy SalesBookRecord from a domain SaleRecord."""
    return ORMSalesBookRecord(
        month=record.month,
        year=record.year,
        line_number=record.line_number,
        document_type=record.document_type,
        sale_type=record.sale_type,
        customer_tax_id=record.counterparty_tax_id,
        customer_name=record.counterparty_name,
        folio=record.folio,
        issue_date=record.document_date,
        exempt_amount=record.exempt_amount,
        net_amount=record.net_amount,
        vat_amount=record.vat_amount,
        total_amount=record.total_amount,
    )
