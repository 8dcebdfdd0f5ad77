from __future__ import annotations

from chia_rs.sized_bytes import bytes32


def hexstr_to_bytes(input_str: str) -> bytes:
    """
    Converts a hex string into bytes, removing the 0x if it's present.
    """
    if input_str.startswith("0x") or input_str.startswith("0X"):
        return bytes.fromhex(input_str[2:])
    return bytes.fromhex(input_str)


def hexstr_to_bytes32(input_str: str) -> bytes32:
    return bytes32(hexstr_to_bytes(input_str))
