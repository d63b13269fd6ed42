from typing import Optional

from ledger.service.address_codec import AddressCodec, CardanoAddressCodec
from utils.logger_utils import get_logger

logger = get_logger("Address Service")

# "addr_test" shares this prefix
BECH32_PAYMENT_PREFIX = "addr"

# Header nibble of bech32 payloads that are really Byron addresses
BYRON_HEADER_NIBBLE = "8"


class AddressService(object):
    def __init__(self, codec: Optional[AddressCodec] = None):
        self.codec = codec or CardanoAddressCodec()

    def canonicalize_address(self, address: Optional[str]) -> Optional[str]:
        """
        Returns the textual form API consumers expect for an address.

        Byron addresses stored under a bech32 encoding are turned back into
        their base58 form. Any other input, including unknown formats, is
        returned unchanged, as is an `addr` string that is not valid bech32.
        """
        if not address:
            return address

        if self.codec.is_byron_address_valid(address):
            return address

        if not address.startswith(BECH32_PAYMENT_PREFIX):
            return address

        try:
            raw = self.codec.decode_bech32_address(address)
        except ValueError as e:
            logger.debug(f"Keeping undecodable address as is: {e}")
            return address

        if not raw.hex().startswith(BYRON_HEADER_NIBBLE):
            return address

        byron_address = self.codec.byron_address_from_bytes(raw)
        if byron_address is None:
            logger.debug(f"Bech32 address {address} has a Byron header but no Byron payload")
            return address

        return byron_address

    def build_reward_address_hex(self, network_id: int, stake_key_hash: Optional[str]) -> Optional[str]:
        """Hex encoded reward address for a stake key hash, None when there is no key hash."""
        if not stake_key_hash:
            return None
        reward_address = self.codec.build_reward_address(network_id, bytes.fromhex(stake_key_hash))
        return reward_address.hex()
