"""Main CLI entry point."""

import logging

import click
from contabook.config import DB_PATH_ENV
from contabook.database.factories import create_sqlite_database
from contabook.logging_config import configure_logging

# Import and register all commands at module level
from contabook.cli.commands import (
    import_cmd,
    journal,
    book,
    vat,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Log import details to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Contabook - Bookkeeping ledger import and VAT settlement.

    Import the general ledger and the purchase and sales books from the
    legacy spreadsheet, browse journal entries and settle VAT per month.
    """
    ctx.ensure_object(dict)
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
import_cmd.register_commands(cli)
journal.register_commands(cli)
book.register_commands(cli)
vat.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
