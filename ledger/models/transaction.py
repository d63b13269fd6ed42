from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from ledger.enums.transaction_type import TransactionState, TransactionType
from ledger.models.certificate import LedgerCertificate
from ledger.models.tx_io import LedgerTxInput, LedgerTxOutput, LedgerWithdrawal


class LedgerTransaction(BaseModel):
    """Canonical, era-agnostic transaction served to API consumers."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    hash: str
    fee: str | None = None
    metadata: Any = None
    valid_contract: bool | None = None
    script_size: int = 0
    type: TransactionType = TransactionType.SHELLEY
    tx_ordinal: int | None = None
    tx_state: TransactionState = TransactionState.SUCCESSFUL
    last_update: datetime | None = None

    # Block context
    block_num: int | None = None
    block_hash: str | None = None
    time: datetime | None = None
    epoch: int | None = None
    slot: int | None = None

    withdrawals: List[LedgerWithdrawal] = Field(default_factory=list)
    certificates: List[LedgerCertificate] = Field(default_factory=list)
    inputs: List[LedgerTxInput] = Field(default_factory=list)
    collateral_inputs: List[LedgerTxInput] = Field(default_factory=list)
    outputs: List[LedgerTxOutput] = Field(default_factory=list)
