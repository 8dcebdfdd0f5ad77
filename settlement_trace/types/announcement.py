from __future__ import annotations

import enum
from dataclasses import dataclass

from chia_rs.sized_bytes import bytes32

from settlement_trace.types.spend_record import SpendRecord
from settlement_trace.util.errors import MissingField


class AnnouncementScope(enum.Enum):
    """
    Coin announcements are bound to the announcing coin's id, puzzle announcements to its puzzle hash.
    """

    COIN = "coin"
    PUZZLE = "puzzle"

    def origin_id(self, record: SpendRecord) -> bytes32:
        if self is AnnouncementScope.COIN:
            return record.coin_id
        if record.puzzle_hash is None:
            raise MissingField("puzzle_hash", f"coin {record.coin_id.hex()} creates a puzzle announcement")
        return record.puzzle_hash


@dataclass(frozen=True)
class AnnouncementCreation:
    scope: AnnouncementScope
    coin_id: bytes32
    origin_id: bytes32
    message: bytes
    announcement_id: bytes32


@dataclass(frozen=True)
class AnnouncementAssertion:
    scope: AnnouncementScope
    coin_id: bytes32
    announcement_id: bytes32
