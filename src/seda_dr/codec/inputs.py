"""Encoding of data request inputs and decoding of results."""

import json
from typing import Any, Union

from seda_dr.core.types import strip_hex_prefix

# Demo value; real requests should pass their own exec inputs
DEFAULT_EXEC_INPUTS = "46724"


def encode_text_input(text: str) -> bytes:
    """Encode text as UTF-8 bytes."""
    return text.encode("utf-8")


def encode_hex_input(hex_str: str) -> bytes:
    """
    Decode a hex string into raw input bytes.

    Args:
        hex_str: Hex string, with or without 0x prefix

    Raises:
        ValueError: If the string is not valid hex
    """
    hex_str = strip_hex_prefix(hex_str.strip())
    try:
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise ValueError(f"Invalid hex input: {e}") from e


def encode_event_slug_input(event_slug: str) -> bytes:
    """
    Encode the input of the PolyMarket event oracle program.

    The program expects a JSON object with a single event_slug field.
    """
    if not event_slug:
        raise ValueError("event_slug cannot be empty")
    return json.dumps({"event_slug": event_slug}, separators=(",", ":")).encode("utf-8")


def decode_result(result_hex: str) -> Union[Any, str, bytes]:
    """
    Decode a hex encoded data request result.

    Returns parsed JSON when the result is a JSON document, the text when it
    is only valid UTF-8, and the raw bytes otherwise.
    """
    raw = bytes.fromhex(strip_hex_prefix(result_hex))
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text
