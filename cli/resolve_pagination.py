import json
from typing import Optional

import click

from config.settings import settings
from ledger.models.cursor import PaginationCursor
from ledger.service.pagination_service import PaginationService
from storage.neo4j.neo4j_client import Neo4jClient
from utils.exceptions import ReferenceMismatchError
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Resolve Pagination CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-u", "--until-block", required=True, type=str, help="Hash of the best block the page must not go past.")
@click.option("-a", "--after-block", default=None, type=str, help="Hash of the block of the last item already seen.")
@click.option("-t", "--after-tx", default=None, type=str, help="Hash of the last transaction already seen.")
@click.option(
    "--max-traversal-depth",
    default=settings.pagination.max_traversal_depth,
    show_default=True,
    type=click.IntRange(min=1),
    help="How many empty blocks may be walked back from the until block.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def resolve_pagination(
    until_block: str,
    after_block: Optional[str],
    after_tx: Optional[str],
    max_traversal_depth: int,
    log_file: Optional[str],
):
    """Resolves a paging cursor into absolute transaction ordinals and prints them as JSON."""
    configure_logging(log_file, settings.app.log_level)

    if after_tx and not after_block:
        raise click.BadOptionUsage("--after-tx", "--after-tx requires --after-block.")

    after = PaginationCursor(block=after_block, tx=after_tx) if after_block else None
    graph_conf = settings.graph_store

    with Neo4jClient(graph_conf.uri, graph_conf.user, graph_conf.password, graph_conf.database) as client:
        with client.read_transaction() as transaction:
            service = PaginationService(transaction, max_traversal_depth=max_traversal_depth)
            try:
                bounds = service.get_pagination_parameters(until_block, after)
            except ReferenceMismatchError as e:
                raise click.ClickException(e.code) from e

    click.echo(json.dumps(bounds.model_dump(by_alias=True)))
