"""Purchase and sales book commands."""

import click
from contabook.cli.error_handling import handle_domain_error
from contabook.cli.formatting import format_amount, format_text
from contabook.domain.books import BookService
from contabook.domain.errors import DomainError


@click.group()
def book_group():
    """Browse the purchase and sales books."""
    pass


@book_group.command("list")
@click.argument("book", type=click.Choice(["purchases", "sales"]))
@click.option("--month", type=int, help="Month (1-12)")
@click.option("--year", type=int, help="Year")
@click.pass_context
def list_records(ctx, book: str, month: int | None, year: int | None):
    """List the rows of the purchase or sales book."""
    db = ctx.obj["db"]
    service = BookService(db)

    try:
        if book == "purchases":
            records = service.list_purchases(month=month, year=year)
        else:
            records = service.list_sales(month=month, year=year)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not records:
        click.echo(f"No {book} records found.")
        return

    click.echo(f"\nFound {len(records)} {book} record(s):")
    click.echo("-" * 120)
    for record in records:
        click.echo(
            f"{record.year:04d}-{record.month:02d} #{record.line_number:<4d} | "
            f"{record.document_date} | {format_text(record.document_type, 6)} | "
            f"{format_text(record.folio, 10)} | {format_text(record.counterparty_tax_id, 12)} | "
            f"{format_text(record.counterparty_name, 25)} | "
            f"Net: {format_amount(record.net_amount):>14s} | "
            f"VAT: {format_amount(record.vat_amount):>12s} | "
            f"Total: {format_amount(record.total_amount):>14s}"
        )


def register_commands(cli):
    """Register book commands with main CLI."""
    cli.add_command(book_group, name="book")
