from enum import Enum


class CertificateType(str, Enum):
    """Certificate `type` property as stored on graph nodes."""

    STAKE_REGISTRATION = "stake_registration"
    STAKE_DEREGISTRATION = "stake_deregistration"
    STAKE_DELEGATION = "stake_delegation"
    POOL_REGISTRATION = "pool_registration"
    POOL_RETIREMENT = "pool_retirement"
    GENESIS_KEY_DELEGATION = "genesis_key_delegation"


class CertificateKind(str, Enum):
    """Certificate kind exposed to API consumers."""

    STAKE_REGISTRATION = "StakeRegistration"
    STAKE_DEREGISTRATION = "StakeDeregistration"
    STAKE_DELEGATION = "StakeDelegation"
    POOL_REGISTRATION = "PoolRegistration"
    POOL_RETIREMENT = "PoolRetirement"

