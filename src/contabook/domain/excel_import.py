"""Spreadsheet import domain service."""

import csv
import zipfile
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from contabook.config import get_fallback_date
from contabook.domain.entities import RawRow
from contabook.domain.errors import (
    NotFoundError,
    StructuralError,
    empty_source,
    sheet_not_found,
    source_file_not_found,
    unsupported_source,
)
from contabook.domain.grouping import count_lines, group_entries, voucher_date_key, voucher_number_key
from contabook.domain.normalizer import (
    normalize_label,
    normalize_ledger_row,
    normalize_purchase,
    normalize_sale,
)
from contabook.logging_config import get_logger

if TYPE_CHECKING:
    from contabook.database.base import Database

logger = get_logger(__name__)

WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}


class ImportCategory(str, Enum):
    """What a sheet holds."""

    LEDGER = "ledger"
    PURCHASES = "purchases"
    SALES = "sales"


# Sheet names used by the legacy workbook, checked in order before falling
# back to the first sheet.
SHEET_NAMES: dict[ImportCategory, tuple[str, ...]] = {
    ImportCategory.LEDGER: ("Hoja1", "Libro Mayor", "Libro Contable"),
    ImportCategory.PURCHASES: ("Libro compra", "Libro Compras", "Libro de Compras"),
    ImportCategory.SALES: ("Libro Ventas", "Libro de Ventas"),
}


@dataclass(frozen=True)
class ImportResult:
    """Counts reported after an import."""

    category: ImportCategory
    rows: int
    entries: int = 0
    lines: int = 0
    records: int = 0
    sheet: Optional[str] = None


def _is_blank_row(values: Any) -> bool:
    return all(value is None or (isinstance(value, str) and not value.strip()) for value in values)


def _row_mapping(headers: list[str], values: Any) -> dict[str, Any]:
    """Pair headers with cell values, skipping unlabelled columns.

    A repeated header keeps its first non-blank value, the same rule the
    normalizer applies to labels that differ only in spacing or case.
    """
    record: dict[str, Any] = {}
    for header, value in zip(headers, values):
        if not header.strip():
            continue
        if header not in record or _is_blank_row((record[header],)):
            record[header] = value
    return record


def _pick_sheet(sheet_names: list[str], category: ImportCategory, sheet: Optional[str]) -> str:
    by_label = {normalize_label(name): name for name in reversed(sheet_names)}
    if sheet is not None:
        match = by_label.get(normalize_label(sheet))
        if match is None:
            raise StructuralError(sheet_not_found(sheet, sheet_names))
        return match
    for candidate in SHEET_NAMES[category]:
        match = by_label.get(normalize_label(candidate))
        if match is not None:
            return match
    return sheet_names[0]


def _read_workbook(path: Path, category: ImportCategory, sheet: Optional[str]) -> tuple[list[RawRow], str]:
    try:
        workbook = load_workbook(filename=path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise StructuralError(f"Could not read workbook {path}: {e}") from e

    try:
        sheet_name = _pick_sheet(workbook.sheetnames, category, sheet)
        rows = workbook[sheet_name].iter_rows(values_only=True)
        headers_row = next(rows, None)
        if headers_row is None:
            return [], sheet_name

        headers = [str(header) if header is not None else "" for header in headers_row]
        records: list[RawRow] = []
        for values in rows:
            if _is_blank_row(values):
                continue
            records.append(_row_mapping(headers, values))
        return records, sheet_name
    finally:
        workbook.close()


def _read_csv(path: Path) -> list[RawRow]:
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        # Try to detect delimiter
        sample = f.read(1024)
        f.seek(0)
        try:
            delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t").delimiter
        except csv.Error:
            delimiter = ","

        reader = csv.reader(f, delimiter=delimiter)
        headers = next(reader, None)
        if headers is None:
            return []
        return [_row_mapping(headers, values) for values in reader if not _is_blank_row(values)]


def read_rows(
    path: str | Path, category: ImportCategory, sheet: Optional[str] = None
) -> tuple[list[RawRow], Optional[str]]:
    """Read the data rows of one sheet as label -> value mappings.

    Args:
        path: Workbook (.xlsx/.xlsm) or CSV file
        category: Which book the rows belong to, used to pick the sheet
        sheet: Explicit worksheet name, overriding the naming convention

    Returns:
        Tuple of (rows, sheet name); the sheet name is None for CSV files

    Raises:
        NotFoundError: If the file does not exist
        StructuralError: If the file cannot be read, the sheet is missing or
            holds no data rows
    """
    source = Path(path)
    if not source.exists():
        raise NotFoundError(source_file_not_found(str(path)))

    suffix = source.suffix.lower()
    if suffix in WORKBOOK_SUFFIXES:
        rows, sheet_name = _read_workbook(source, category, sheet)
    elif suffix == ".csv":
        try:
            rows, sheet_name = _read_csv(source), None
        except UnicodeDecodeError as e:
            raise StructuralError(f"Could not read {path}: {e}") from e
    else:
        raise StructuralError(unsupported_source(str(path)))

    if not rows:
        raise StructuralError(empty_source(str(path), sheet_name))
    return rows, sheet_name


class ExcelImportService:
    """Service for importing the ledger and the purchase and sales books."""

    def __init__(self, db: "Database", fallback_date: Optional[date] = None):
        """Initialize import service.

        Args:
            db: Database instance
            fallback_date: Date given to rows with unreadable dates. Defaults
                to 1 January of the configured fallback year.
        """
        self.db = db
        self.fallback_date = fallback_date if fallback_date is not None else get_fallback_date()

    def import_file(
        self,
        path: str | Path,
        category: ImportCategory | str,
        sheet: Optional[str] = None,
        group_by_voucher_number: bool = False,
    ) -> ImportResult:
        """Import one sheet into the database.

        Ledger rows are normalized and grouped into journal entries; purchase
        and sales rows are normalized and stored as they are.

        Args:
            path: Workbook or CSV file
            category: ledger, purchases or sales
            sheet: Optional worksheet name
            group_by_voucher_number: Split ledger entries that share voucher
                type and date but carry different voucher numbers

        Returns:
            ImportResult with row, entry, line and record counts

        Raises:
            ValueError: If category is unknown
            NotFoundError: If the file does not exist
            StructuralError: If the file cannot be read or holds no rows
        """
        category = ImportCategory(category)
        rows, sheet_name = read_rows(path, category, sheet)
        logger.info("Read %d %s rows from %s", len(rows), category.value, path)

        if category is ImportCategory.LEDGER:
            return self._import_ledger(rows, sheet_name, group_by_voucher_number)
        if category is ImportCategory.PURCHASES:
            records = [
                normalize_purchase(row, index, self.fallback_date) for index, row in enumerate(rows)
            ]
            stored = self.db.insert_purchase_records(records)
        else:
            records = [
                normalize_sale(row, index, self.fallback_date) for index, row in enumerate(rows)
            ]
            stored = self.db.insert_sale_records(records)

        logger.info("Stored %d %s records", stored, category.value)
        return ImportResult(category=category, rows=len(rows), records=stored, sheet=sheet_name)

    def _import_ledger(
        self, rows: list[RawRow], sheet_name: Optional[str], group_by_voucher_number: bool
    ) -> ImportResult:
        key = voucher_number_key if group_by_voucher_number else voucher_date_key
        ledger_rows = [normalize_ledger_row(row, self.fallback_date) for row in rows]
        entries = group_entries(ledger_rows, key=key)

        for entry in entries:
            self.db.create_journal_entry(entry)

        lines = count_lines(entries)
        logger.info("Stored %d journal entries with %d lines", len(entries), lines)
        return ImportResult(
            category=ImportCategory.LEDGER,
            rows=len(rows),
            entries=len(entries),
            lines=lines,
            sheet=sheet_name,
        )
