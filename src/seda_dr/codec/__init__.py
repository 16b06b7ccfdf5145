"""Data request input encoding and result decoding."""

from seda_dr.codec.inputs import (
    DEFAULT_EXEC_INPUTS,
    decode_result,
    encode_event_slug_input,
    encode_hex_input,
    encode_text_input,
)

__all__ = [
    "DEFAULT_EXEC_INPUTS",
    "decode_result",
    "encode_event_slug_input",
    "encode_hex_input",
    "encode_text_input",
]
