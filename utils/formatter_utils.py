from typing import Any, Dict, Literal, Mapping, Optional, Union

import orjson

from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")

# Graph stores hand back wide integers as native numbers, decimal strings or
# driver-specific integer objects depending on how the property was written.
BigNumber = Union[int, float, str, Any]

DisplayMode = Literal["string", "number"]


def to_number(value: BigNumber) -> Union[int, float]:
    """
    Normalizes a wide-integer encoding into a native number.

    Strings are parsed as base-10 integers, native numbers pass through and
    anything else is narrowed with int(). No range checks are done.
    """
    if isinstance(value, str):
        return int(value, 10)
    if isinstance(value, (int, float)):
        return value
    return int(value)


def to_display_number(value: Optional[BigNumber], mode: DisplayMode = "string") -> Union[str, int, float, None]:
    """
    Formats a wide integer for API output.

    None stays None. "string" mode keeps large amounts lossless on the wire,
    "number" mode returns the normalized numeric value.
    """
    if value is None:
        return None
    if mode == "string":
        if isinstance(value, str):
            return value
        return str(to_number(value))
    if mode == "number":
        return to_number(value)
    raise ValueError(f"Unsupported display mode: {mode}")


def hex_byte_length(hex_string: Optional[str]) -> int:
    """Number of bytes encoded by a hex string. Empty or missing counts as 0."""
    if not hex_string:
        return 0
    return len(bytes.fromhex(hex_string))


def parse_json_or_none(raw: Optional[Union[str, bytes]]) -> Any:
    """Parses an embedded JSON property. Malformed JSON raises orjson.JSONDecodeError."""
    if not raw:
        return None
    return orjson.loads(raw)


def node_properties(node: Optional[Any]) -> Optional[Dict[str, Any]]:
    """
    Returns the property map of a graph node.
    Works for neo4j Node objects as well as plain dicts (tests, JSON dumps).
    """
    if node is None:
        return None
    if isinstance(node, Mapping):
        return dict(node)
    # neo4j.graph.Node exposes items() but is not a Mapping
    return dict(node.items())
