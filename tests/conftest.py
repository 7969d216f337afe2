"""Shared pytest fixtures for contabook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest
from openpyxl import Workbook

from contabook.database.factories import create_sqlite_database
from contabook.domain.entities import PurchaseRecord, SaleRecord
from contabook.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _no_fallback_year_env(monkeypatch):
    """Keep the default fallback year regardless of the caller's environment."""
    monkeypatch.delenv("CONTABOOK_FALLBACK_YEAR", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Each CLI invocation configures logging against its own captured stream."""
    yield
    reset_logging()


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def make_workbook(tmp_path):
    """Write an .xlsx file from {sheet title: [header row, data rows...]}."""

    def _make(sheets: dict[str, list[list]], name: str = "book.xlsx") -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            sheet = workbook.create_sheet(title=title)
            for row in rows:
                sheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return _make


@pytest.fixture
def make_sale():
    """Build sales book records with a given VAT amount."""

    def _make(vat, net="0", month=1, year=2023, line_number=1) -> SaleRecord:
        return SaleRecord(
            month=month,
            year=year,
            line_number=line_number,
            document_type="33",
            counterparty_tax_id="78999888-1",
            counterparty_name="Cliente Uno",
            folio=str(500 + line_number),
            document_date=date(year, month, 10),
            net_amount=Decimal(net),
            vat_amount=Decimal(vat),
            total_amount=Decimal(net) + Decimal(vat),
            exempt_amount=Decimal("0"),
            sale_type="Del Giro",
        )

    return _make


@pytest.fixture
def make_purchase():
    """Build purchase book records with a given VAT amount."""

    def _make(vat, net="0", month=1, year=2023, line_number=1) -> PurchaseRecord:
        return PurchaseRecord(
            month=month,
            year=year,
            line_number=line_number,
            document_type="33",
            counterparty_tax_id="76123456-7",
            counterparty_name="Ferreteria Sur",
            folio=str(1000 + line_number),
            document_date=date(year, month, 5),
            net_amount=Decimal(net),
            vat_amount=Decimal(vat),
            total_amount=Decimal(net) + Decimal(vat),
            exempt_amount=Decimal("0"),
            purchase_type="Del Giro",
            reception_date=date(year, month, 6),
        )

    return _make
