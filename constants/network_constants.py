from pydantic import BaseModel, ConfigDict

BYRON_ERA = "Byron"

# Reward address network ids
MAINNET_NETWORK_ID = 1
TESTNET_NETWORK_ID = 0


class EraConstants(BaseModel):
    """Anchors used to turn an absolute slot into a unix timestamp."""

    model_config = ConfigDict(frozen=True)

    genesis_unix_timestamp: int
    shelley_unix_timestamp: int
    shelley_initial_slot: int
    byron_slot_duration_seconds: int


ERA_TIMESTAMPS = {
    "mainnet": EraConstants(
        genesis_unix_timestamp=1506243091,
        shelley_unix_timestamp=1596491091,
        shelley_initial_slot=4924800,
        byron_slot_duration_seconds=20,
    ),
    "testnet": EraConstants(
        genesis_unix_timestamp=1654041600,
        shelley_unix_timestamp=1655769600,
        shelley_initial_slot=86400,
        byron_slot_duration_seconds=20,
    ),
    # preview never had a Byron era, both anchors coincide
    "preview": EraConstants(
        genesis_unix_timestamp=1666648800,
        shelley_unix_timestamp=1666648800,
        shelley_initial_slot=0,
        byron_slot_duration_seconds=20,
    ),
}


def get_era_constants(network: str) -> EraConstants:
    try:
        return ERA_TIMESTAMPS[network]
    except KeyError:
        raise ValueError(f"Unknown network '{network}'. Available: {sorted(ERA_TIMESTAMPS)}") from None


def get_network_id(network: str) -> int:
    return MAINNET_NETWORK_ID if network == "mainnet" else TESTNET_NETWORK_ID
