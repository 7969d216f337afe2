"""SQLAlchemy models for contabook database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(16, 2)


class JournalEntry(Base):
    """Journal entry header model."""

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    entry_number = Column(Integer, nullable=False)
    entry_code = Column(String, nullable=False)
    entry_type = Column(String, nullable=False)
    entry_date = Column(Date, nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    gloss = Column(String, nullable=False, default="")
    status = Column(String, nullable=False, default="POSTED")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    lines = relationship(
        "JournalEntryLine",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="JournalEntryLine.line_order",
    )


class JournalEntryLine(Base):
    """Journal entry line model."""

    __tablename__ = "journal_entry_lines"

    id = Column(Integer, primary_key=True)
    journal_entry_id = Column(Integer, ForeignKey("journal_entries.id"), nullable=False)
    line_order = Column(Integer, nullable=False)
    account_code = Column(String, nullable=False, default="")
    account_name = Column(String, nullable=False, default="")
    debit = Column(MONEY, nullable=False)
    credit = Column(MONEY, nullable=False)
    control = Column(MONEY, nullable=True)
    compensation = Column(MONEY, nullable=True)
    third_party_tax_id = Column(String, nullable=True)
    third_party_name = Column(String, nullable=True)
    document_type = Column(String, nullable=True)
    document_number = Column(String, nullable=True)

    # Relationships
    entry = relationship("JournalEntry", back_populates="lines")


class PurchaseBookRecord(Base):
    """Purchase book row model."""

    __tablename__ = "purchase_book"

    id = Column(Integer, primary_key=True)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    line_number = Column(Integer, nullable=False)
    document_type = Column(String, nullable=True)
    purchase_type = Column(String, nullable=True)
    supplier_tax_id = Column(String, nullable=True)
    supplier_name = Column(String, nullable=True)
    folio = Column(String, nullable=True)
    document_date = Column(Date, nullable=False)
    reception_date = Column(Date, nullable=True)
    acknowledgment_date = Column(Date, nullable=True)
    exempt_amount = Column(MONEY, nullable=False)
    net_amount = Column(MONEY, nullable=False)
    vat_amount = Column(MONEY, nullable=False)
    fixed_asset_amount = Column(MONEY, nullable=False)
    non_recoverable_vat = Column(MONEY, nullable=False)
    total_amount = Column(MONEY, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class SalesBookRecord(Base):
    """Sales book row model."""

    __tablename__ = "sales_book"

    id = Column(Integer, primary_key=True)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    line_number = Column(Integer, nullable=False)
    document_type = Column(String, nullable=True)
    sale_type = Column(String, nullable=True)
    customer_tax_id = Column(String, nullable=True)
    customer_name = Column(String, nullable=True)
    folio = Column(String, nullable=True)
    issue_date = Column(Date, nullable=False)
    exempt_amount = Column(MONEY, nullable=False)
    net_amount = Column(MONEY, nullable=False)
    vat_amount = Column(MONEY, nullable=False)
    total_amount = Column(MONEY, nullable=False)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
