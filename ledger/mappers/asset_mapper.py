from typing import Any, Dict, List, Union

from ledger.models.tx_io import LedgerAsset
from utils.formatter_utils import parse_json_or_none, to_display_number


class LedgerAssetMapper(object):
    @staticmethod
    def graph_assets_to_assets(raw_assets: Union[str, List[Dict[str, Any]], None]) -> List[LedgerAsset]:
        """
        Output nodes keep their native assets either as a list or as a JSON
        encoded string of that list.
        """
        if isinstance(raw_assets, (str, bytes)):
            raw_assets = parse_json_or_none(raw_assets)
        if not raw_assets:
            return []

        return [LedgerAssetMapper.json_dict_to_asset(asset) for asset in raw_assets]

    @staticmethod
    def json_dict_to_asset(json_dict: Dict[str, Any]) -> LedgerAsset:
        amount = json_dict.get("amount", json_dict.get("quantity"))
        return LedgerAsset(
            policy_id=json_dict.get("policy_id", json_dict.get("policyId")),
            name=json_dict.get("name", json_dict.get("asset_name")),
            amount=to_display_number(amount),
        )
