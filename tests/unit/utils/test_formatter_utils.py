from decimal import Decimal

import orjson
import pytest

from utils.formatter_utils import (
    hex_byte_length,
    node_properties,
    parse_json_or_none,
    to_display_number,
    to_number,
)


class DriverInteger(object):
    """Stands in for a driver-specific wide integer object."""

    def __init__(self, value):
        self.value = value

    def __int__(self):
        return self.value


@pytest.mark.parametrize("value", [45000000000, "45000000000", Decimal("45000000000"), DriverInteger(45000000000)])
def test_to_number_same_value_for_every_encoding(value):
    assert to_number(value) == 45000000000
    assert isinstance(to_number(value), int)


def test_to_number_passes_native_numbers_through():
    assert to_number(0.3) == 0.3
    assert to_number(-7) == -7


def test_to_number_rejects_non_numeric_strings():
    with pytest.raises(ValueError):
        to_number("12abc")


def test_to_display_number_keeps_none():
    assert to_display_number(None) is None
    assert to_display_number(None, "string") is None
    assert to_display_number(None, "number") is None


def test_to_display_number_string_mode():
    assert to_display_number(170000) == "170000"
    assert to_display_number("170000", "string") == "170000"
    assert to_display_number(DriverInteger(12), "string") == "12"


def test_to_display_number_number_mode():
    assert to_display_number("42", "number") == 42
    assert to_display_number(Decimal("42"), "number") == 42


def test_to_display_number_zero_is_not_absent():
    assert to_display_number(0) == "0"
    assert to_display_number(0, "number") == 0


def test_to_display_number_unknown_mode():
    with pytest.raises(ValueError, match="Unsupported display mode"):
        to_display_number(1, "hex")


def test_hex_byte_length():
    assert hex_byte_length(None) == 0
    assert hex_byte_length("") == 0
    assert hex_byte_length("deadbeef") == 4


def test_parse_json_or_none():
    assert parse_json_or_none(None) is None
    assert parse_json_or_none('[{"a": 1}]') == [{"a": 1}]
    with pytest.raises(orjson.JSONDecodeError):
        parse_json_or_none("{not json")


def test_node_properties_accepts_items_objects():
    class FakeNode(object):
        def items(self):
            return [("hash", "abc"), ("number", 1)]

    assert node_properties(None) is None
    assert node_properties({"hash": "abc"}) == {"hash": "abc"}
    assert node_properties(FakeNode()) == {"hash": "abc", "number": 1}
