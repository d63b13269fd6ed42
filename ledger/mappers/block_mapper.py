from typing import Any

from ledger.models.block import LedgerBlock
from utils.formatter_utils import node_properties, to_number


def _number_or_none(value: Any) -> int | None:
    return None if value is None else to_number(value)


class LedgerBlockMapper(object):
    @staticmethod
    def graph_node_to_block(node: Any) -> LedgerBlock:
        properties = node_properties(node)
        return LedgerBlock(
            number=_number_or_none(properties.get("number")),
            hash=properties.get("hash"),
            previous_hash=properties.get("previous_hash"),
            era=properties.get("era"),
            epoch=_number_or_none(properties.get("epoch")),
            epoch_slot=_number_or_none(properties.get("epoch_slot")),
            slot=_number_or_none(properties.get("slot")),
            tx_count=_number_or_none(properties.get("tx_count")) or 0,
            body_size=_number_or_none(properties.get("body_size")),
            issuer_vkey=properties.get("issuer_vkey"),
        )
