from datetime import datetime, timezone

from constants.network_constants import BYRON_ERA, EraConstants
from ledger.models.block import LedgerBlock


class BlockTimestampService(object):
    """
    Maps absolute slots to wall-clock time.

    Byron slots last `byron_slot_duration_seconds`; from Shelley onwards one
    slot is one second, counted from the Shelley hard fork.
    """

    def __init__(self, era_constants: EraConstants):
        self.era_constants = era_constants

    def get_block_timestamp(self, block: LedgerBlock) -> datetime:
        return self.get_timestamp_for_slot(block.era, block.slot)

    def get_timestamp_for_slot(self, era: str | None, slot: int) -> datetime:
        if era == BYRON_ERA:
            unix_timestamp = self.byron_unix_timestamp(slot)
        else:
            unix_timestamp = self.shelley_unix_timestamp(slot)
        return datetime.fromtimestamp(unix_timestamp, tz=timezone.utc)

    def byron_unix_timestamp(self, slot: int) -> int:
        constants = self.era_constants
        return constants.genesis_unix_timestamp + slot * constants.byron_slot_duration_seconds

    def shelley_unix_timestamp(self, slot: int) -> int:
        constants = self.era_constants
        return constants.shelley_unix_timestamp + (slot - constants.shelley_initial_slot)
