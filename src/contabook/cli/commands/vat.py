"""VAT settlement commands."""

import click
from contabook.cli.error_handling import handle_domain_error
from contabook.cli.formatting import format_amount
from contabook.domain.errors import DomainError
from contabook.domain.vat import VatSettlementService


@click.group()
def vat_group():
    """Settle VAT (IVA) from the purchase and sales books."""
    pass


@vat_group.command("settle")
@click.option("--month", type=int, required=True, help="Month (1-12)")
@click.option("--year", type=int, required=True, help="Year")
@click.pass_context
def settle(ctx, month: int, year: int):
    """Show fiscal debit, fiscal credit and the net VAT for a month."""
    db = ctx.obj["db"]
    service = VatSettlementService(db)

    try:
        settlement = service.settle_period(month, year)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nVAT settlement {year:04d}-{month:02d}")
    click.echo("=" * 50)
    click.echo(f"{'Taxable sales':<30s} {format_amount(settlement.taxable_sales):>19s}")
    click.echo(f"{'Fiscal debit (sales VAT)':<30s} {format_amount(settlement.fiscal_debit):>19s}")
    click.echo(f"{'Taxable purchases':<30s} {format_amount(settlement.taxable_purchases):>19s}")
    click.echo(f"{'Fiscal credit (purchase VAT)':<30s} {format_amount(settlement.fiscal_credit):>19s}")
    click.echo("-" * 50)
    click.echo(f"{'Net VAT':<30s} {format_amount(settlement.net_payable):>19s}")
    click.echo(f"Status: {settlement.status.value}")


@vat_group.command("history")
@click.option("--year", type=int, required=True, help="Year")
@click.pass_context
def history(ctx, year: int):
    """List the monthly settlements of a year."""
    db = ctx.obj["db"]
    service = VatSettlementService(db)

    periods = service.settlement_history(year)
    if not periods:
        click.echo(f"No purchase or sales records for {year}.")
        return

    click.echo(f"\n{'Period':<8s} {'Fiscal debit':>16s} {'Fiscal credit':>16s} {'Net VAT':>16s}  Status")
    click.echo("-" * 80)
    for period in periods:
        s = period.settlement
        click.echo(
            f"{period.period:<8s} {format_amount(s.fiscal_debit):>16s} "
            f"{format_amount(s.fiscal_credit):>16s} {format_amount(s.net_payable):>16s}  {s.status.value}"
        )


def register_commands(cli):
    """Register VAT commands with main CLI."""
    cli.add_command(vat_group, name="vat")
