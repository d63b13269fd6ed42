from typing import Optional

import click
import orjson

from config.settings import settings
from ledger.exporters.console_item_exporter import ConsoleItemExporter, export_all
from ledger.mappers.transaction_mapper import create_transaction_mapper
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Normalize Transactions CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-i",
    "--input",
    "input_file",
    required=True,
    type=click.File("rb"),
    help="JSON lines file, one raw graph record (tx, block, outputs, ...) per line. Use - for stdin.",
)
@click.option(
    "-n",
    "--network",
    default=settings.network.network,
    show_default=True,
    type=click.Choice(["mainnet", "testnet", "preview"]),
    help="Network the records were read from.",
)
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
def normalize_transactions(input_file, network: str, log_file: Optional[str]):
    """Converts dumped graph records into canonical transactions and prints them."""
    configure_logging(log_file, settings.app.log_level)

    records = [orjson.loads(line) for line in input_file if line.strip()]
    logger.info(f"Read {len(records)} raw records")

    mapper = create_transaction_mapper(network)
    transactions = mapper.graph_records_to_transactions(records)

    exported = export_all(ConsoleItemExporter(item_label="transaction"), transactions)
    logger.info(f"Exported {exported} transactions")
