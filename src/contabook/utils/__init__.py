"""Utility functions for contabook."""

from contabook.utils.date_parser import parse_date, parse_sheet_date, excel_serial_to_date
from contabook.utils.amount_parser import parse_amount, parse_amount_or_default

__all__ = [
    "parse_date",
    "parse_sheet_date",
    "excel_serial_to_date",
    "parse_amount",
    "parse_amount_or_default",
]
