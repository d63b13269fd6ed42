import zlib
from typing import Optional, Protocol

import base58
import cbor2
from pycardano import Address, Network, VerificationKeyHash
from pycardano.crypto.bech32 import CHARSET as BECH32_CHARSET
from pycardano.crypto.bech32 import bech32_verify_checksum, convertbits

from utils.logger_utils import get_logger

logger = get_logger("Address Codec")

# Byron addresses wrap their payload in CBOR tag 24 (embedded CBOR)
BYRON_PAYLOAD_TAG = 24

BECH32_SEPARATOR = "1"
BECH32_CHECKSUM_LENGTH = 6


class AddressCodec(Protocol):
    """Binary/textual address primitives the canonicalizers depend on."""

    def is_byron_address_valid(self, address: str) -> bool: ...

    def decode_bech32_address(self, address: str) -> bytes: ...

    def byron_address_from_bytes(self, raw: bytes) -> Optional[str]: ...

    def build_reward_address(self, network_id: int, stake_key_hash: bytes) -> bytes: ...


class CardanoAddressCodec(object):
    """
    Default codec.

    Shelley-era encodings go through pycardano. Legacy Byron addresses are
    base58 strings of `[tag24(payload), crc32(payload)]`, which pycardano does
    not model, so they are checked with cbor2 directly.
    """

    def is_byron_address_valid(self, address: str) -> bool:
        try:
            raw = base58.b58decode(address)
        except ValueError:
            return False
        return self._is_byron_cbor(raw)

    def decode_bech32_address(self, address: str) -> bytes:
        """
        Decodes a bech32 address into its raw bytes.

        Byron payloads wrapped in bech32 run well past the 90 character limit
        of BIP-173, so no length cap is applied. Raises ValueError when the
        string is not valid bech32.
        """
        bech = address.lower()
        if address != bech and address != address.upper():
            raise ValueError(f"Invalid bech32 address: mixed case in {address}")
        if any(ord(char) < 33 or ord(char) > 126 for char in bech):
            raise ValueError(f"Invalid bech32 address: unprintable character in {address}")

        separator = bech.rfind(BECH32_SEPARATOR)
        if separator < 1 or separator + BECH32_CHECKSUM_LENGTH + 1 > len(bech):
            raise ValueError(f"Invalid bech32 address: misplaced separator in {address}")

        hrp, data_part = bech[:separator], bech[separator + 1 :]
        if not all(char in BECH32_CHARSET for char in data_part):
            raise ValueError(f"Invalid bech32 address: bad character in {address}")

        data = [BECH32_CHARSET.find(char) for char in data_part]
        if bech32_verify_checksum(hrp, data) is None:
            raise ValueError(f"Invalid bech32 address: checksum mismatch in {address}")

        decoded = convertbits(data[:-BECH32_CHECKSUM_LENGTH], 5, 8, False)
        if not decoded:
            raise ValueError(f"Invalid bech32 address: bad padding in {address}")
        return bytes(decoded)

    def byron_address_from_bytes(self, raw: bytes) -> Optional[str]:
        if not self._is_byron_cbor(raw):
            return None
        return base58.b58encode(raw).decode("ascii")

    def build_reward_address(self, network_id: int, stake_key_hash: bytes) -> bytes:
        reward_address = Address(
            staking_part=VerificationKeyHash(stake_key_hash),
            network=Network(network_id),
        )
        return bytes(reward_address)

    @staticmethod
    def _is_byron_cbor(raw: bytes) -> bool:
        try:
            decoded = cbor2.loads(raw)
        except (ValueError, TypeError, EOFError):
            return False

        if not isinstance(decoded, list) or len(decoded) != 2:
            return False

        tagged, checksum = decoded
        if not isinstance(tagged, cbor2.CBORTag) or tagged.tag != BYRON_PAYLOAD_TAG:
            return False
        if not isinstance(tagged.value, bytes) or not isinstance(checksum, int):
            return False

        return zlib.crc32(tagged.value) == checksum
