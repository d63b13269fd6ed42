import pytest
from unittest.mock import MagicMock

from constants.network_constants import get_era_constants
from ledger.mappers.certificate_mapper import LedgerCertificateMapper
from ledger.mappers.transaction_mapper import LedgerTransactionMapper
from ledger.mappers.tx_io_mapper import LedgerTxIOMapper
from ledger.models.block import LedgerBlock
from ledger.service.address_codec import CardanoAddressCodec
from ledger.service.address_service import AddressService
from ledger.service.block_timestamp_service import BlockTimestampService

STAKE_KEY_HASH = "ab" * 28
REWARD_ADDRESS_BYTES = bytes.fromhex("e1" + STAKE_KEY_HASH)


@pytest.fixture
def mock_codec():
    codec = MagicMock(spec=CardanoAddressCodec)
    codec.is_byron_address_valid.return_value = False
    codec.decode_bech32_address.return_value = bytes.fromhex("01" + "00" * 56)
    codec.byron_address_from_bytes.return_value = None
    codec.build_reward_address.return_value = REWARD_ADDRESS_BYTES
    return codec


@pytest.fixture
def address_service(mock_codec):
    return AddressService(mock_codec)


@pytest.fixture
def certificate_mapper(address_service):
    return LedgerCertificateMapper(network_id=1, address_service=address_service)


@pytest.fixture
def transaction_mapper(address_service, certificate_mapper):
    return LedgerTransactionMapper(
        block_timestamp_service=BlockTimestampService(get_era_constants("mainnet")),
        certificate_mapper=certificate_mapper,
        tx_io_mapper=LedgerTxIOMapper(address_service),
    )


@pytest.fixture
def shelley_block_node():
    return {
        "number": "4490511",
        "hash": "blockhash01",
        "previous_hash": "blockhash00",
        "era": "Shelley",
        "epoch": 208,
        "epoch_slot": 1000,
        "slot": 4925800,
        "tx_count": 2,
        "body_size": 1024,
        "issuer_vkey": "vkey",
    }


@pytest.fixture
def shelley_block(shelley_block_node):
    return LedgerBlock(number=4490511, hash="blockhash01", era="Shelley", epoch=208, epoch_slot=1000, slot=4925800)


@pytest.fixture
def graph_record(shelley_block_node):
    return {
        "tx": {
            "hash": "txhash01",
            "fee": "170000",
            "metadata": '{"674": {"msg": ["hello"]}}',
            "is_valid": True,
            "tx_index": 1,
        },
        "block": shelley_block_node,
        "outputs": [
            {
                "address": "addr1qxoutput",
                "amount": 1500000,
                "assets": '[{"policy_id": "policy01", "name": "tok", "amount": "10"}]',
                "id": "txhash01:0",
            },
            {"address": "addr1qxchange", "amount": "2000000", "assets": [], "datum_hash": "datum01"},
        ],
        "withdrawals": [{"address": "stake1withdrawal", "amount": 5000}],
        "certificates": [
            {"type": "stake_registration", "cert_index": 0, "addrKeyHash": STAKE_KEY_HASH},
            {"type": "move_instantaneous_rewards", "cert_index": 1},
        ],
        "inputs": [
            {
                "tx_in": {"tx_id": "srctx01", "index": 3},
                "tx_out": {"address": "addr1qxspent", "amount": "4000000", "assets": []},
            },
            {"tx_in": {"tx_id": "srctx02", "index": "0"}, "tx_out": None},
        ],
        "collateral_inputs": [
            {
                "tx_in": {"tx_id": "coltx01", "index": 1},
                "tx_out": {"address": "addr1qxcollateral", "amount": 5000000, "id": "coltx01:1", "assets": []},
            },
            {"tx_in": {"tx_id": "coltx02", "index": 0}, "tx_out": None},
            {"tx_in": None, "tx_out": None},
        ],
        "scripts": [{"script_hash": "sh01", "script_hex": "4e4d01000033222220051200120011"}, {"script_hash": "sh02"}],
    }
