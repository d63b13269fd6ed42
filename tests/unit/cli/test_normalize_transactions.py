import json

import orjson
from unittest.mock import patch
from click.testing import CliRunner

from cli import cli


def _record(tx_hash, tx_index):
    return {
        "tx": {"hash": tx_hash, "fee": "170000", "tx_index": tx_index, "is_valid": True},
        "block": {
            "number": 10,
            "hash": "blockhash",
            "era": "Byron",
            "epoch": 0,
            "epoch_slot": 9,
            "slot": 9,
            "tx_count": 2,
        },
        "outputs": [{"address": "", "amount": "1000"}],
    }


def test_prints_one_canonical_transaction_per_record(tmp_path):
    input_file = tmp_path / "records.jsonl"
    input_file.write_bytes(b"\n".join([orjson.dumps(_record("tx01", 0)), b"", orjson.dumps(_record("tx02", 1))]))

    result = CliRunner().invoke(cli, ["normalize_transactions", "-i", str(input_file), "-n", "mainnet"])

    assert result.exit_code == 0, result.output
    assert result.output.count("[TRANSACTION]: ") == 2
    first = result.output.split("[TRANSACTION]: ")[1]
    transaction = json.loads(first)
    assert transaction["hash"] == "tx01"
    assert transaction["type"] == "byron"
    assert transaction["fee"] == "170000"
    assert transaction["tx_ordinal"] == 0
    # Byron slot 9 on mainnet is 9 * 20s after genesis
    assert transaction["time"].startswith("2017-09-23T21:47:51")


def test_rejects_unknown_network(tmp_path):
    input_file = tmp_path / "records.jsonl"
    input_file.write_bytes(orjson.dumps(_record("tx01", 0)))

    result = CliRunner().invoke(cli, ["normalize_transactions", "-i", str(input_file), "-n", "sidechain"])

    assert result.exit_code != 0
    assert "sidechain" in result.output


def test_uses_selected_network_constants(tmp_path):
    input_file = tmp_path / "records.jsonl"
    input_file.write_bytes(orjson.dumps(_record("tx01", 0)))

    with patch("cli.normalize_transactions.create_transaction_mapper") as mock_create:
        mock_create.return_value.graph_records_to_transactions.return_value = []
        result = CliRunner().invoke(cli, ["normalize_transactions", "-i", str(input_file), "-n", "preview"])

    assert result.exit_code == 0, result.output
    mock_create.assert_called_once_with("preview")
