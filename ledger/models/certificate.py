from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ledger.enums.certificate_type import CertificateKind


class _CertificateBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, use_enum_values=True)

    cert_index: int | None = None


class StakeRegistrationCertificate(_CertificateBase):
    kind: CertificateKind = CertificateKind.STAKE_REGISTRATION
    reward_address: str | None = None


class StakeDeregistrationCertificate(_CertificateBase):
    kind: CertificateKind = CertificateKind.STAKE_DEREGISTRATION
    reward_address: str | None = None


class StakeDelegationCertificate(_CertificateBase):
    kind: CertificateKind = CertificateKind.STAKE_DELEGATION
    pool_key_hash: str | None = None
    reward_address: str | None = None


class PoolMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    url: str | None = None
    metadata_hash: str | None = None


class PoolRegistrationCertificate(_CertificateBase):
    # Pool registrations carry no kind on the wire
    operator: str | None = None
    vrf_key_hash: str | None = None
    pledge: str | None = None
    cost: str | None = None
    margin: str | None = None
    reward_account: str | None = None
    pool_owners: List[str] | None = None
    relays: Any = None
    pool_metadata: PoolMetadata | None = None


class PoolRetirementCertificate(_CertificateBase):
    kind: CertificateKind = CertificateKind.POOL_RETIREMENT
    pool_key_hash: str | None = None
    epoch: int | None = None


LedgerCertificate = Union[
    StakeRegistrationCertificate,
    StakeDeregistrationCertificate,
    StakeDelegationCertificate,
    PoolRegistrationCertificate,
    PoolRetirementCertificate,
]
