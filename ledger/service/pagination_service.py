from typing import Any, Dict, Optional

from ledger.models.cursor import CursorBounds, PaginationCursor
from storage.neo4j.queries import build_pagination_query
from utils.exceptions import ReferenceBestBlockMismatchError, ReferenceBlockMismatchError
from utils.formatter_utils import to_number
from utils.logger_utils import get_logger

logger = get_logger("Pagination Service")

# Matches no transaction, so the anchor search yields a null afterTx
EMPTY_TX_HASH = ""

DEFAULT_MAX_TRAVERSAL_DEPTH = 10000


class PaginationService(object):
    """
    Resolves a paging request into absolute transaction ordinals.

    Transaction ordinals are not contiguous across blocks because many blocks
    are empty, so the bounds are located by walking the block chain in the
    graph store.
    """

    def __init__(self, transaction, max_traversal_depth: int = DEFAULT_MAX_TRAVERSAL_DEPTH):
        """
        Args:
            transaction: An open graph store transaction exposing run(query, parameters).
            max_traversal_depth: Upper bound of blocks walked back from the until block.
        """
        self.transaction = transaction
        self.max_traversal_depth = max_traversal_depth

    def get_pagination_parameters(self, until_block: str, after: Optional[PaginationCursor] = None) -> CursorBounds:
        with_after = after is not None
        query = build_pagination_query(self.max_traversal_depth, with_after)

        parameters: Dict[str, Any] = {"untilBlock": until_block}
        if with_after:
            parameters["afterBlock"] = after.block
            parameters["afterTx"] = after.tx or EMPTY_TX_HASH

        records = list(self.transaction.run(query, parameters))
        if not records:
            logger.warning(f"No transaction-bearing block found at or before {until_block}")
            raise ReferenceBestBlockMismatchError()

        record = records[0]
        until_tx = record.get("untilTx")
        until_block_number = record.get("untilBlock")
        after_tx = record.get("afterTx")
        after_tx_index = record.get("afterTxIndex")
        after_block_number = record.get("afterBlock")

        if until_tx is None or until_block_number is None:
            logger.warning(f"Until block {until_block} resolved without a boundary transaction")
            raise ReferenceBestBlockMismatchError()

        if with_after and after.tx and (after_tx is None or after_tx_index is None):
            logger.warning(f"Transaction {after.tx} not found in block {after.block}")
            raise ReferenceBlockMismatchError()

        if with_after and after_block_number is None:
            logger.warning(f"After block {after.block} not found")
            raise ReferenceBlockMismatchError()

        return CursorBounds(
            until_tx=to_number(until_tx),
            until_block=to_number(until_block_number),
            after_tx=_to_number_or_zero(after_tx),
            after_block=_to_number_or_zero(after_block_number),
            after_tx_index=_to_number_or_zero(after_tx_index),
        )


def _to_number_or_zero(value: Any) -> int:
    return 0 if value is None else to_number(value)
