"""Journal viewing commands."""

import click
from contabook.cli.error_handling import handle_domain_error
from contabook.cli.formatting import format_amount, format_text
from contabook.domain.entities import VoucherType
from contabook.domain.errors import DomainError
from contabook.domain.journal import JournalService
from contabook.utils.date_parser import parse_date


@click.group()
def journal_group():
    """Browse journal entries."""
    pass


@journal_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option(
    "--type",
    "voucher_type",
    type=click.Choice([t.value for t in VoucherType], case_sensitive=False),
    help="Voucher type",
)
@click.option("--search", help="Text to find in the gloss, account code or name, RUT or third-party name")
@click.pass_context
def list_entries(
    ctx,
    start_date: str | None,
    end_date: str | None,
    voucher_type: str | None,
    search: str | None,
):
    """List journal entries with their totals."""
    db = ctx.obj["db"]
    service = JournalService(db)

    start = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    end = None
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    entries = service.list_entries(
        start_date=start, end_date=end, voucher_type=voucher_type, search=search
    )
    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\nFound {len(entries)} journal entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 110)
    for entry in entries:
        marker = "" if entry.is_balanced else "  (unbalanced)"
        click.echo(
            f"ID: {entry.id:5d} | {entry.entry_code} | {entry.entry_date} | "
            f"{entry.voucher_type.value:8s} | {format_text(entry.gloss, 30)} | "
            f"Debit: {format_amount(entry.total_debit):>16s} | "
            f"Credit: {format_amount(entry.total_credit):>16s}{marker}"
        )


@journal_group.command("show")
@click.argument("entry_id", type=int)
@click.pass_context
def show_entry(ctx, entry_id: int):
    """Show one journal entry with its lines."""
    db = ctx.obj["db"]
    service = JournalService(db)

    try:
        entry = service.get_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\n{entry.entry_code} ({entry.voucher_type.value}) - {entry.entry_date}")
    if entry.gloss:
        click.echo(f"Gloss: {entry.gloss}")
    click.echo("=" * 100)
    for order, line in enumerate(entry.lines, start=1):
        third_party = " ".join(
            part for part in (line.third_party_tax_id, line.third_party_name) if part
        )
        click.echo(
            f"{order:3d}. {line.account_code:10s} {format_text(line.account_name, 30)} "
            f"{format_amount(line.debit):>16s} {format_amount(line.credit):>16s}  {third_party}"
        )
    click.echo("-" * 100)
    click.echo(
        f"{'Totals':>45s} {format_amount(entry.total_debit):>16s} "
        f"{format_amount(entry.total_credit):>16s}"
    )


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
