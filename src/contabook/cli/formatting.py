"""CLI output helpers."""

from decimal import Decimal
from typing import Optional


def format_amount(amount: Optional[Decimal]) -> str:
    """Render a money amount with thousands separators."""
    if amount is None:
        return "-"
    return f"${amount:,.2f}"


def format_text(value: Optional[str], width: int) -> str:
    """Pad or truncate text to a column width."""
    text = value or ""
    if len(text) > width:
        text = text[: width - 1] + "…"
    return f"{text:<{width}}"
