"""Tests for spreadsheet row normalization."""

import dataclasses
import pytest
from datetime import date, datetime
from decimal import Decimal

from contabook.domain.entities import AccountingLine, VoucherType
from contabook.domain.normalizer import (
    normalize_label,
    normalize_line,
    normalize_ledger_row,
    normalize_purchase,
    normalize_sale,
)


class TestNormalizeLabel:
    """Tests for column label normalization."""

    def test_trailing_space_and_case(self):
        assert normalize_label("CODIGO ") == normalize_label("codigo") == "CODIGO"

    def test_separators_and_accents(self):
        assert normalize_label("Cta_Descripción") == "CTA DESCRIPCION"
        assert normalize_label("N. DOC ") == "N DOC"


class TestNormalizeLine:
    """Tests for normalize_line."""

    def test_full_row(self):
        line = normalize_line(
            {
                "CODIGO ": "2101",
                "CTA DESCRIPCION": "Proveedores",
                "DEBE ": "1,190",
                "HABER ": 0,
                "CONTROL ": "5",
                "COMPENSACION": 7,
                "RUT ": "76123456-7",
                "NOMBRE": "Ferreteria Sur",
                "TIPO DOC ": "FAC",
                "N. DOC ": 1001.0,
            }
        )
        assert line == AccountingLine(
            account_code="2101",
            account_name="Proveedores",
            debit=Decimal("1190"),
            credit=Decimal("0"),
            control=Decimal("5"),
            compensation=Decimal("7"),
            third_party_tax_id="76123456-7",
            third_party_name="Ferreteria Sur",
            document_type="FAC",
            document_number="1001",
        )

    def test_empty_row_gets_defaults(self):
        line = normalize_line({})
        assert line.account_code == ""
        assert line.account_name == ""
        assert line.debit == 0
        assert line.credit == 0
        assert line.control is None
        assert line.compensation is None
        assert line.third_party_tax_id is None
        assert line.document_number is None

    def test_malformed_debit_is_zero(self):
        assert normalize_line({"DEBE": "abc"}).debit == 0

    def test_malformed_optional_numeric_is_none(self):
        line = normalize_line({"CONTROL": "n/a", "COMPENSACION": 0})
        assert line.control is None
        assert line.compensation == 0

    def test_negative_amounts_clamped(self):
        line = normalize_line({"DEBE": "-5", "HABER": "(20)"})
        assert line.debit == 0
        assert line.credit == 0

    def test_integral_float_code_rendered_as_integer(self):
        assert normalize_line({"CODIGO": 1101.0}).account_code == "1101"

    def test_first_alias_wins(self):
        line = normalize_line({"document_type": "BOL", "TIPO DOC": "FAC"})
        assert line.document_type == "FAC"

    def test_blank_alias_skipped(self):
        line = normalize_line({"N. DOC": "  ", "document_number": "77"})
        assert line.document_number == "77"

    def test_both_debit_and_credit_kept(self):
        line = normalize_line({"DEBE": "10", "HABER": "4"})
        assert (line.debit, line.credit) == (Decimal("10"), Decimal("4"))

    def test_idempotent_on_canonical_rows(self):
        first = normalize_line(
            {"CODIGO ": "1101", "CTA DESCRIPCION": "Banco", "DEBE ": "1,500.25", "RUT ": "1-9"}
        )
        again = normalize_line(dataclasses.asdict(first))
        assert again == first

    def test_idempotent_with_all_fields(self):
        line = AccountingLine(
            account_code="4101",
            account_name="Ventas",
            debit=Decimal("0"),
            credit=Decimal("500"),
            control=Decimal("0"),
            compensation=None,
            third_party_tax_id="78999888-1",
            third_party_name="Cliente Uno",
            document_type="33",
            document_number="501",
        )
        assert normalize_line(dataclasses.asdict(line)) == line


class TestNormalizeLedgerRow:
    """Tests for normalize_ledger_row."""

    def test_unparseable_date_uses_fallback(self):
        row = normalize_ledger_row({"FECHA": "not-a-date"})
        assert row.entry_date == date(2023, 1, 1)
        assert row.raw_date == "not-a-date"

    def test_missing_date_uses_fallback(self):
        assert normalize_ledger_row({}).entry_date == date(2023, 1, 1)

    def test_explicit_fallback_date(self):
        row = normalize_ledger_row({"FECHA": "??"}, fallback_date=date(2020, 1, 1))
        assert row.entry_date == date(2020, 1, 1)

    def test_fallback_year_from_environment(self, monkeypatch):
        monkeypatch.setenv("CONTABOOK_FALLBACK_YEAR", "2019")
        assert normalize_ledger_row({"FECHA": None}).entry_date == date(2019, 1, 1)

    def test_serial_date(self):
        assert normalize_ledger_row({"FECHA": 44927}).entry_date == date(2023, 1, 1)

    def test_datetime_cell(self):
        row = normalize_ledger_row({"FECHA": datetime(2023, 5, 2)})
        assert row.entry_date == date(2023, 5, 2)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("EGRESO", VoucherType.EGRESO),
            (" ingreso ", VoucherType.INGRESO),
            ("traspaso", VoucherType.TRASPASO),
            ("expense", VoucherType.EGRESO),
            ("AJUSTE", VoucherType.TRASPASO),
            (None, VoucherType.TRASPASO),
        ],
    )
    def test_voucher_type(self, raw, expected):
        assert normalize_ledger_row({"TIPO COMP": raw}).voucher_type == expected

    def test_header_fields(self):
        row = normalize_ledger_row(
            {"TIPO_COMP": "EGRESO", "GLOSA ": "Pago", "N. COMP": 12.0, "CODIGO ": "1101"}
        )
        assert row.voucher_type == VoucherType.EGRESO
        assert row.gloss == "Pago"
        assert row.voucher_number == "12"
        assert row.line.account_code == "1101"


class TestNormalizeBooks:
    """Tests for purchase and sales book rows."""

    def test_purchase_row(self):
        record = normalize_purchase(
            {
                "Nro": 4,
                "Mes": "1",
                "Tipo Doc": 33,
                "Tipo Compra": "Del Giro",
                "RUT Proveedor": "76123456-7",
                "Razon Social": "Ferreteria Sur",
                "Folio": 1001.0,
                "Fecha Docto": 44931,
                "Fecha Recepcion": "2023-01-06",
                "Fecha Acuse": None,
                "Monto Exento": 0,
                "Monto Neto": "1,000",
                "Monto IVA Recuperable": 190,
                "Monto Neto Activo Fijo": 0,
                "Monto Iva No Recuperable": "",
                "Monto Total": 1190,
            }
        )
        assert record.line_number == 4
        assert (record.month, record.year) == (1, 2023)
        assert record.document_type == "33"
        assert record.folio == "1001"
        assert record.document_date == date(2023, 1, 5)
        assert record.reception_date == date(2023, 1, 6)
        assert record.acknowledgment_date is None
        assert record.net_amount == Decimal("1000")
        assert record.vat_amount == Decimal("190")
        assert record.non_recoverable_vat == 0
        assert record.total_amount == Decimal("1190")

    def test_purchase_defaults(self):
        record = normalize_purchase({"Fecha Docto": "2023-07-14"}, index=2)
        assert record.line_number == 3
        assert record.month == 7
        assert record.year == 2023
        assert record.vat_amount == 0
        assert record.counterparty_name is None

    def test_invalid_month_uses_document_month(self):
        record = normalize_purchase({"Mes": "13", "Fecha Docto": "2023-04-02"})
        assert record.month == 4

    def test_sale_row(self):
        record = normalize_sale(
            {
                "Nro": 1,
                "Mes": 2,
                "Tipo Doc": "39",
                "Tipo Venta": "Del Giro",
                "Rut cliente": "79111222-3",
                "Razon Social": "Cliente Dos",
                "Folio": "502",
                "Fecha Docto": "15/02/2023",
                "Monto Neto": 100,
                "Monto IVA": "19",
                "Monto total": 119,
            }
        )
        assert record.counterparty_tax_id == "79111222-3"
        assert record.document_date == date(2023, 2, 15)
        assert record.vat_amount == Decimal("19")
        assert record.total_amount == Decimal("119")
        assert record.sale_type == "Del Giro"

    def test_sale_malformed_vat(self):
        record = normalize_sale({"Monto IVA": "n/a"})
        assert record.vat_amount == 0
        assert record.document_date == date(2023, 1, 1)


class TestLabelVariants:
    """Columns whose labels differ only in spacing or case."""

    def test_blank_variant_does_not_hide_filled_one(self):
        line = normalize_line({"CODIGO": "", "CODIGO ": "1101", "DEBE": None, "DEBE ": "500"})
        assert line.account_code == "1101"
        assert line.debit == Decimal("500")

    def test_first_filled_variant_wins(self):
        line = normalize_line({"HABER ": "20", "haber": "30"})
        assert line.credit == Decimal("20")

    def test_partial_date_uses_fallback(self):
        assert normalize_ledger_row({"FECHA": "10:30"}).entry_date == date(2023, 1, 1)

    def test_book_vat_variant(self):
        record = normalize_sale({"Monto IVA": " ", "MONTO IVA ": "19"})
        assert record.vat_amount == Decimal("19")
