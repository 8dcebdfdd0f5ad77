from __future__ import annotations

import logging
from typing import Any

import pytest

from settlement_trace._tests.util.spend_records import coin_id, puzzle_hash
from settlement_trace.types.conditions import (
    AggSigMe,
    AssertCoinAnnouncement,
    AssertMyCoinId,
    AssertPuzzleAnnouncement,
    CreateCoin,
    CreateCoinAnnouncement,
    CreatePuzzleAnnouncement,
    ReserveFee,
    condition_from_json_dict,
    conditions_from_json_dicts,
)
from settlement_trace.util.errors import InputError, InvalidCondition


def test_parse_announcement_conditions() -> None:
    announcement_id = coin_id(9)
    assert condition_from_json_dict({"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["cafe"]}) == (
        CreateCoinAnnouncement(b"\xca\xfe")
    )
    assert condition_from_json_dict({"opcode": "CREATE_PUZZLE_ANNOUNCEMENT", "vars": ["0x01"]}) == (
        CreatePuzzleAnnouncement(b"\x01")
    )
    assert condition_from_json_dict({"opcode": "ASSERT_COIN_ANNOUNCEMENT", "vars": [announcement_id.hex()]}) == (
        AssertCoinAnnouncement(announcement_id)
    )
    assert condition_from_json_dict(
        {"opcode": "ASSERT_PUZZLE_ANNOUNCEMENT", "vars": ["0x" + announcement_id.hex()]}
    ) == AssertPuzzleAnnouncement(announcement_id)


def test_parse_other_conditions() -> None:
    create_coin = condition_from_json_dict(
        {
            "opcode": "CREATE_COIN",
            "send_puzzle": puzzle_hash(1).hex(),
            "amt": 1000,
            "child_coin_name": coin_id(2).hex(),
            "send_address": "xch1example",
        }
    )
    assert create_coin == CreateCoin(puzzle_hash(1), 1000, coin_id(2), "xch1example")
    assert isinstance(create_coin, CreateCoin)
    assert create_coin.amount == 1000

    assert condition_from_json_dict({"opcode": "ASSERT_MY_COIN_ID", "vars": [coin_id(3).hex()]}) == (
        AssertMyCoinId(coin_id(3))
    )
    assert condition_from_json_dict({"opcode": "AGG_SIG_ME", "vars": ["aa", "bb"]}) == AggSigMe((b"\xaa", b"\xbb"))
    assert condition_from_json_dict({"opcode": "RESERVE_FEE", "vars": []}) == ReserveFee(())


def test_parse_condition_list() -> None:
    conditions = conditions_from_json_dicts(
        [
            {"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["00"]},
            {"opcode": "RESERVE_FEE", "vars": ["64"]},
        ]
    )
    assert conditions == [CreateCoinAnnouncement(b"\x00"), ReserveFee((b"\x64",))]


@pytest.mark.parametrize(
    "opcode",
    [
        "CREATE_COIN_ANNOUNCEMENT",
        "CREATE_PUZZLE_ANNOUNCEMENT",
        "ASSERT_COIN_ANNOUNCEMENT",
        "ASSERT_PUZZLE_ANNOUNCEMENT",
    ],
)
def test_empty_announcement_vars(opcode: str) -> None:
    with pytest.raises(InvalidCondition, match=opcode):
        condition_from_json_dict({"opcode": opcode, "vars": []})


def test_extra_vars_are_dropped_with_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        condition = condition_from_json_dict({"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["01", "02"]})
    assert condition == CreateCoinAnnouncement(b"\x01")
    assert "CREATE_COIN_ANNOUNCEMENT has 2 vars" in caplog.text


def test_extra_vars_are_rejected_in_strict_mode() -> None:
    with pytest.raises(InvalidCondition, match="expected 1"):
        condition_from_json_dict({"opcode": "ASSERT_COIN_ANNOUNCEMENT", "vars": [coin_id(1).hex()] * 2}, True)


@pytest.mark.parametrize(
    "json_dict",
    [
        {"opcode": "NOT_A_CONDITION", "vars": []},
        {"vars": ["00"]},
        {"opcode": "CREATE_COIN_ANNOUNCEMENT"},
        {"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": "00"},
        {"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["zz"]},
        {"opcode": "ASSERT_COIN_ANNOUNCEMENT", "vars": ["0011"]},
        {"opcode": "CREATE_COIN", "send_puzzle": "00" * 32, "amt": 1, "child_coin_name": "00" * 32},
        {
            "opcode": "CREATE_COIN",
            "send_puzzle": "00" * 32,
            "amt": -1,
            "child_coin_name": "00" * 32,
            "send_address": "",
        },
        ["CREATE_COIN_ANNOUNCEMENT"],
    ],
)
def test_malformed_condition(json_dict: Any) -> None:
    with pytest.raises(InputError):
        condition_from_json_dict(json_dict)


def test_conditions_are_hashable() -> None:
    conditions = conditions_from_json_dicts(
        [
            {"opcode": "AGG_SIG_ME", "vars": ["aa", "bb"]},
            {"opcode": "RESERVE_FEE", "vars": ["64"]},
            {"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["00"]},
        ]
    )
    assert len(set(conditions)) == 3
    assert hash(AggSigMe((b"\xaa", b"\xbb"))) == hash(conditions[0])
