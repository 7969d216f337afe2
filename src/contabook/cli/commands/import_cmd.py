"""Spreadsheet import command."""

import click
from contabook.cli.error_handling import handle_domain_error
from contabook.config import FALLBACK_YEAR_ENV, get_fallback_date
from contabook.domain.errors import DomainError
from contabook.domain.excel_import import ExcelImportService, ImportCategory


@click.command("import")
@click.argument("source_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in ImportCategory]),
    help="What the sheet holds",
)
@click.option("--sheet", help="Worksheet name (defaults to the usual sheet for the category)")
@click.option(
    "--fallback-year",
    type=int,
    envvar=FALLBACK_YEAR_ENV,
    help="Year assigned to rows with unreadable dates (January 1st)",
)
@click.option(
    "--group-by-voucher-number",
    is_flag=True,
    help="Keep ledger vouchers with the same type and date apart when their N. COMP differs",
)
@click.pass_context
def import_file(
    ctx,
    source_file: str,
    category: str,
    sheet: str | None,
    fallback_year: int | None,
    group_by_voucher_number: bool,
):
    """Import the ledger or a purchase/sales book from an .xlsx or .csv file."""
    db = ctx.obj["db"]
    service = ExcelImportService(db, fallback_date=get_fallback_date(fallback_year))

    try:
        result = service.import_file(
            source_file,
            category,
            sheet=sheet,
            group_by_voucher_number=group_by_voucher_number,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nImport complete:")
    if result.sheet:
        click.echo(f"  Sheet: {result.sheet}")
    click.echo(f"  Rows read: {result.rows}")
    if result.category is ImportCategory.LEDGER:
        click.echo(f"  Journal entries: {result.entries}")
        click.echo(f"  Lines: {result.lines}")
    else:
        click.echo(f"  Records: {result.records}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_file)
