import click

from cli.normalize_transactions import normalize_transactions
from cli.resolve_pagination import resolve_pagination


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    pass


# Cursor bounds for a paging request
cli.add_command(resolve_pagination, "resolve_pagination")

# Canonical transactions from dumped graph records
cli.add_command(normalize_transactions, "normalize_transactions")
