from typing import Any, Dict, Iterable, List, Mapping, Optional

from constants.network_constants import BYRON_ERA, get_era_constants, get_network_id
from ledger.enums.transaction_type import TransactionState, TransactionType
from ledger.mappers.block_mapper import LedgerBlockMapper
from ledger.mappers.certificate_mapper import LedgerCertificateMapper
from ledger.mappers.tx_io_mapper import LedgerTxIOMapper
from ledger.models.block import LedgerBlock
from ledger.models.transaction import LedgerTransaction
from ledger.service.address_codec import AddressCodec
from ledger.service.address_service import AddressService
from ledger.service.block_timestamp_service import BlockTimestampService
from utils.formatter_utils import hex_byte_length, node_properties, parse_json_or_none, to_number
from utils.logger_utils import get_logger

logger = get_logger("Transaction Mapper")


def get_scripts_size(scripts: Iterable[Mapping[str, Any]]) -> int:
    return sum(hex_byte_length(script.get("script_hex")) for script in scripts)


def get_transaction_type(block: LedgerBlock) -> TransactionType:
    if block.era is not None and block.era.lower() == BYRON_ERA.lower():
        return TransactionType.BYRON
    return TransactionType.SHELLEY


class LedgerTransactionMapper(object):
    """
    Assembles one canonical transaction out of a graph query record.

    A record bundles `tx`, `block` and the separately collected `outputs`,
    `withdrawals`, `certificates`, `inputs`, `collateral_inputs` and `scripts`.
    """

    def __init__(
        self,
        block_timestamp_service: BlockTimestampService,
        certificate_mapper: LedgerCertificateMapper,
        tx_io_mapper: Optional[LedgerTxIOMapper] = None,
    ):
        self.block_timestamp_service = block_timestamp_service
        self.certificate_mapper = certificate_mapper
        self.tx_io_mapper = tx_io_mapper or LedgerTxIOMapper(certificate_mapper.address_service)
        self.block_mapper = LedgerBlockMapper()

    def graph_records_to_transactions(self, records: Iterable[Mapping[str, Any]]) -> List[LedgerTransaction]:
        return [self.graph_record_to_transaction(record) for record in records]

    def graph_record_to_transaction(self, record: Mapping[str, Any]) -> LedgerTransaction:
        tx = node_properties(record.get("tx"))
        block = self.block_mapper.graph_node_to_block(record.get("block"))
        block_time = self.block_timestamp_service.get_block_timestamp(block)
        scripts = [node_properties(script) for script in record.get("scripts") or []]

        certificates = []
        for node in record.get("certificates") or []:
            certificate = self.certificate_mapper.graph_node_to_certificate(node, block)
            if certificate is None:
                logger.debug(f"Omitting unsupported certificate from transaction {tx.get('hash')}")
                continue
            certificates.append(certificate)

        return LedgerTransaction(
            hash=tx.get("hash"),
            fee=str(to_number(tx.get("fee"))),
            metadata=parse_json_or_none(tx.get("metadata")),
            valid_contract=tx.get("is_valid"),
            script_size=get_scripts_size(scripts),
            type=get_transaction_type(block),
            tx_ordinal=to_number(tx.get("tx_index")),
            tx_state=TransactionState.SUCCESSFUL,
            last_update=block_time,
            block_num=block.number,
            block_hash=block.hash,
            time=block_time,
            epoch=block.epoch,
            slot=block.epoch_slot,
            withdrawals=[
                self.tx_io_mapper.graph_node_to_withdrawal(node) for node in record.get("withdrawals") or []
            ],
            certificates=certificates,
            inputs=[self.tx_io_mapper.graph_pair_to_input(pair) for pair in record.get("inputs") or []],
            collateral_inputs=self.tx_io_mapper.graph_pairs_to_collateral_inputs(
                record.get("collateral_inputs") or []
            ),
            outputs=[self.tx_io_mapper.graph_node_to_output(node) for node in record.get("outputs") or []],
        )

    @staticmethod
    def transaction_to_dict(transaction: LedgerTransaction) -> Dict[str, Any]:
        return transaction.model_dump(mode="json", by_alias=True)


def create_transaction_mapper(network: str, codec: Optional[AddressCodec] = None) -> LedgerTransactionMapper:
    """Wires a transaction mapper for one network's constants."""
    address_service = AddressService(codec)
    return LedgerTransactionMapper(
        block_timestamp_service=BlockTimestampService(get_era_constants(network)),
        certificate_mapper=LedgerCertificateMapper(get_network_id(network), address_service),
        tx_io_mapper=LedgerTxIOMapper(address_service),
    )
