from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LedgerAsset(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    policy_id: str | None = None
    name: str | None = None
    amount: str | None = None


class LedgerTxInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    address: str | None = None
    amount: str | None = None
    # tx hash and index glued together without a separator, kept for wire compatibility
    id: str | None = None
    index: int | None = None
    tx_hash: str | None = None
    assets: List[LedgerAsset] = Field(default_factory=list)


class LedgerTxOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    address: str | None = None
    amount: str | None = None
    data_hash: str | None = None
    assets: List[LedgerAsset] = Field(default_factory=list)


class LedgerWithdrawal(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    address: str | None = None
    amount: str | None = None
    data_hash: None = None
    assets: List[LedgerAsset] = Field(default_factory=list, max_length=0)
