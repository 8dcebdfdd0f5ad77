from __future__ import annotations

from hashlib import sha256
from typing import SupportsBytes, Union

from chia_rs.sized_bytes import bytes32


def std_hash(b: Union[bytes, SupportsBytes]) -> bytes32:
    """
    The standard hash used in many places.
    """
    return bytes32(sha256(bytes(b)).digest())


def derive_announcement_id(origin_id: bytes32, message: bytes) -> bytes32:
    """
    The id a CREATE_*_ANNOUNCEMENT condition produces and an ASSERT_*_ANNOUNCEMENT references.
    `origin_id` is the coin id for coin announcements and the puzzle hash for puzzle announcements.
    """
    return std_hash(bytes(origin_id) + bytes(message))
