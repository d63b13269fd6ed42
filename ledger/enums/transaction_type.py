from enum import Enum


class TransactionType(str, Enum):
    BYRON = "byron"
    SHELLEY = "shelley"


class TransactionState(str, Enum):
    # Failed phase-2 transactions are still reported as Successful, see valid_contract
    SUCCESSFUL = "Successful"
