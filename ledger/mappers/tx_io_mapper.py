from typing import Any, Dict, List, Mapping, Optional

from ledger.mappers.asset_mapper import LedgerAssetMapper
from ledger.models.tx_io import LedgerTxInput, LedgerTxOutput, LedgerWithdrawal
from ledger.service.address_service import AddressService
from utils.formatter_utils import node_properties, to_display_number, to_number


class LedgerTxIOMapper(object):
    def __init__(self, address_service: Optional[AddressService] = None):
        self.address_service = address_service or AddressService()

    def graph_node_to_output(self, node: Any) -> LedgerTxOutput:
        properties = node_properties(node)
        return LedgerTxOutput(
            address=self.address_service.canonicalize_address(properties.get("address")),
            amount=to_display_number(properties.get("amount")),
            data_hash=properties.get("datum_hash"),
            assets=LedgerAssetMapper.graph_assets_to_assets(properties.get("assets")),
        )

    def graph_pair_to_input(self, pair: Mapping[str, Any]) -> LedgerTxInput:
        """
        Maps a `{tx_in, tx_out}` pair. The spent output may be missing from the
        graph, in which case address and amount stay None.
        """
        tx_in = node_properties(pair.get("tx_in"))
        tx_out = node_properties(pair.get("tx_out"))
        index = to_number(tx_in.get("index"))

        return LedgerTxInput(
            address=self._spent_address(tx_out),
            amount=to_display_number(tx_out.get("amount")) if tx_out else None,
            id=f"{tx_in.get('tx_id')}{index}",
            index=index,
            tx_hash=tx_in.get("tx_id"),
            assets=LedgerAssetMapper.graph_assets_to_assets(tx_out.get("assets") if tx_out else None),
        )

    def graph_pairs_to_collateral_inputs(self, pairs: List[Mapping[str, Any]]) -> List[LedgerTxInput]:
        """
        Unlike regular inputs, collateral entries without a tx_in or without a
        resolved output are dropped instead of being reported with nulls.
        """
        collateral_inputs = []
        for pair in pairs:
            tx_in = node_properties(pair.get("tx_in"))
            tx_out = node_properties(pair.get("tx_out"))
            if not tx_in or not tx_out:
                continue

            output_id = tx_out.get("id")
            collateral_inputs.append(
                LedgerTxInput(
                    address=self._spent_address(tx_out),
                    amount=to_display_number(tx_out.get("amount")),
                    id=output_id.replace(":", "", 1) if output_id else None,
                    index=to_number(tx_in.get("index")),
                    tx_hash=tx_in.get("tx_id"),
                    assets=LedgerAssetMapper.graph_assets_to_assets(tx_out.get("assets")),
                )
            )
        return collateral_inputs

    @staticmethod
    def graph_node_to_withdrawal(node: Any) -> LedgerWithdrawal:
        properties = node_properties(node)
        # Withdrawals never carry assets or a datum
        return LedgerWithdrawal(
            address=properties.get("address"),
            amount=to_display_number(properties.get("amount")),
        )

    def _spent_address(self, tx_out: Optional[Dict[str, Any]]) -> Optional[str]:
        if not tx_out:
            return None
        return self.address_service.canonicalize_address(tx_out.get("address"))
