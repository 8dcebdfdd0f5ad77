from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from chia_rs.sized_bytes import bytes32

from settlement_trace.types.conditions import Condition
from settlement_trace.types.spend_record import SpendRecord


def coin_id(n: int) -> bytes32:
    return bytes32(n.to_bytes(32, "big"))


def puzzle_hash(n: int) -> bytes32:
    return bytes32(bytes([0xFF]) + n.to_bytes(31, "big"))


def make_record(
    coin: bytes32,
    conditions: Sequence[Condition] = (),
    *,
    puzzle: Optional[bytes32] = None,
    tags: Optional[Sequence[str]] = None,
    children: Sequence[SpendRecord] = (),
) -> SpendRecord:
    return SpendRecord(
        coin, puzzle, "standard", None if tags is None else tuple(tags), True, tuple(conditions), tuple(children)
    )


def record_json(
    coin: bytes32,
    conditions: Sequence[dict[str, Any]] = (),
    *,
    puzzle: Optional[bytes32] = None,
    tags: Optional[list[str]] = None,
    children: Sequence[dict[str, Any]] = (),
) -> dict[str, Any]:
    json_dict: dict[str, Any] = {
        "Coin": coin.hex(),
        "Type": "standard",
        "Spend": True,
        "Conditions": list(conditions),
        "Children": list(children),
    }
    if puzzle is not None:
        json_dict["Coin_puzzle_hash"] = puzzle.hex()
    if tags is not None:
        json_dict["Tags"] = tags
    return json_dict
