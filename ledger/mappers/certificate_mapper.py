from typing import Any, Callable, Dict, Optional

from ledger.enums.certificate_type import CertificateType
from ledger.models.block import LedgerBlock
from ledger.models.certificate import (
    LedgerCertificate,
    PoolMetadata,
    PoolRegistrationCertificate,
    PoolRetirementCertificate,
    StakeDelegationCertificate,
    StakeDeregistrationCertificate,
    StakeRegistrationCertificate,
)
from ledger.service.address_service import AddressService
from utils.formatter_utils import node_properties, parse_json_or_none, to_display_number
from utils.logger_utils import get_logger

logger = get_logger("Certificate Mapper")


class LedgerCertificateMapper(object):
    def __init__(self, network_id: int, address_service: Optional[AddressService] = None):
        self.network_id = network_id
        self.address_service = address_service or AddressService()
        self._handlers: Dict[CertificateType, Callable[[Dict[str, Any], LedgerBlock], LedgerCertificate]] = {
            CertificateType.STAKE_REGISTRATION: self._to_stake_registration,
            CertificateType.STAKE_DEREGISTRATION: self._to_stake_deregistration,
            CertificateType.STAKE_DELEGATION: self._to_stake_delegation,
            CertificateType.GENESIS_KEY_DELEGATION: self._to_stake_delegation,
            CertificateType.POOL_REGISTRATION: self._to_pool_registration,
            CertificateType.POOL_RETIREMENT: self._to_pool_retirement,
        }

    def graph_node_to_certificate(self, node: Any, block: LedgerBlock) -> Optional[LedgerCertificate]:
        """
        Expands a certificate node into the shape of its variant.

        Returns None for variants that have no canonical shape yet (e.g.
        move instantaneous rewards) so the caller can leave them out.
        """
        properties = node_properties(node)
        raw_type = properties.get("type")
        try:
            certificate_type = CertificateType(raw_type)
        except ValueError:
            logger.debug(f"Unsupported certificate type: {raw_type}")
            return None

        return self._handlers[certificate_type](properties, block)

    def _reward_address(self, properties: Dict[str, Any]) -> Optional[str]:
        return self.address_service.build_reward_address_hex(self.network_id, properties.get("addrKeyHash"))

    def _to_stake_registration(self, properties: Dict[str, Any], block: LedgerBlock) -> StakeRegistrationCertificate:
        return StakeRegistrationCertificate(
            cert_index=to_display_number(properties.get("cert_index"), "number"),
            reward_address=self._reward_address(properties),
        )

    def _to_stake_deregistration(self, properties: Dict[str, Any], block: LedgerBlock) -> StakeDeregistrationCertificate:
        return StakeDeregistrationCertificate(
            cert_index=to_display_number(properties.get("cert_index"), "number"),
            reward_address=self._reward_address(properties),
        )

    def _to_stake_delegation(self, properties: Dict[str, Any], block: LedgerBlock) -> StakeDelegationCertificate:
        return StakeDelegationCertificate(
            cert_index=to_display_number(properties.get("cert_index"), "number"),
            pool_key_hash=properties.get("pool_keyhash"),
            reward_address=self._reward_address(properties),
        )

    @staticmethod
    def _to_pool_registration(properties: Dict[str, Any], block: LedgerBlock) -> PoolRegistrationCertificate:
        url = properties.get("url")
        metadata_hash = properties.get("pool_metadata_hash")
        pool_metadata = PoolMetadata(url=url, metadata_hash=metadata_hash) if url or metadata_hash else None

        return PoolRegistrationCertificate(
            cert_index=to_display_number(properties.get("cert_index"), "number"),
            operator=properties.get("operator"),
            vrf_key_hash=properties.get("vrf_keyhash"),
            pledge=to_display_number(properties.get("pledge")),
            cost=to_display_number(properties.get("cost")),
            margin=to_display_number(properties.get("margin")),
            reward_account=properties.get("reward_account"),
            pool_owners=properties.get("pool_owners"),
            relays=parse_json_or_none(properties.get("relays")),
            pool_metadata=pool_metadata,
        )

    @staticmethod
    def _to_pool_retirement(properties: Dict[str, Any], block: LedgerBlock) -> PoolRetirementCertificate:
        return PoolRetirementCertificate(
            cert_index=to_display_number(properties.get("cert_index"), "number"),
            pool_key_hash=properties.get("pool_keyhash"),
            epoch=block.epoch,
        )

    @staticmethod
    def certificate_to_dict(certificate: LedgerCertificate) -> Dict[str, Any]:
        return certificate.model_dump(mode="json", by_alias=True)
