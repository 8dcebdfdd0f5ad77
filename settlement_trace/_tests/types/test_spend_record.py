from __future__ import annotations

from typing import Any

import pytest

from settlement_trace._tests.util.spend_records import coin_id, puzzle_hash, record_json
from settlement_trace.types.conditions import AssertCoinAnnouncement, CreateCoinAnnouncement
from settlement_trace.types.spend_record import SpendRecord
from settlement_trace.util.errors import InputError, InvalidCondition


def test_from_json_dict() -> None:
    json_dict = record_json(
        coin_id(1),
        [{"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["6d"]}],
        puzzle=puzzle_hash(1),
        tags=["settlement_payments"],
        children=[record_json(coin_id(2), [{"opcode": "ASSERT_COIN_ANNOUNCEMENT", "vars": [coin_id(9).hex()]}])],
    )
    record = SpendRecord.from_json_dict(json_dict)

    assert record.coin_id == coin_id(1)
    assert record.puzzle_hash == puzzle_hash(1)
    assert record.type == "standard"
    assert record.tags == ("settlement_payments",)
    assert record.spent is True
    assert record.conditions == (CreateCoinAnnouncement(b"m"),)
    [child] = record.children
    assert child.coin_id == coin_id(2)
    assert child.puzzle_hash is None
    assert child.tags is None
    assert child.conditions == (AssertCoinAnnouncement(coin_id(9)),)


def test_null_optional_fields() -> None:
    json_dict = record_json(coin_id(1))
    json_dict["Coin_puzzle_hash"] = None
    json_dict["Tags"] = None
    record = SpendRecord.from_json_dict(json_dict)
    assert record.puzzle_hash is None
    assert record.tags is None


def test_has_tag() -> None:
    assert SpendRecord.from_json_dict(record_json(coin_id(1), tags=["a", "b"])).has_tag("b")
    assert not SpendRecord.from_json_dict(record_json(coin_id(1), tags=[])).has_tag("b")
    assert not SpendRecord.from_json_dict(record_json(coin_id(1))).has_tag("b")


def test_strict_vars_reaches_children() -> None:
    child = record_json(coin_id(2), [{"opcode": "CREATE_COIN_ANNOUNCEMENT", "vars": ["01", "02"]}])
    json_dict = record_json(coin_id(1), children=[child])
    assert SpendRecord.from_json_dict(json_dict).children[0].conditions == (CreateCoinAnnouncement(b"\x01"),)
    with pytest.raises(InvalidCondition):
        SpendRecord.from_json_dict(json_dict, strict_vars=True)


def _without(key: str) -> dict[str, Any]:
    json_dict = record_json(coin_id(1))
    del json_dict[key]
    return json_dict


@pytest.mark.parametrize(
    "json_dict",
    [
        _without("Coin"),
        _without("Type"),
        _without("Spend"),
        _without("Conditions"),
        _without("Children"),
        {**record_json(coin_id(1)), "Coin": "1234"},
        {**record_json(coin_id(1)), "Coin_puzzle_hash": "not hex"},
        {**record_json(coin_id(1)), "Tags": "settlement_payments"},
        {**record_json(coin_id(1)), "Spend": "false"},
        {**record_json(coin_id(1)), "Spend": 1},
        {**record_json(coin_id(1)), "Children": {}},
        {**record_json(coin_id(1)), "Children": [None]},
        "not a record",
    ],
)
def test_malformed_record(json_dict: Any) -> None:
    with pytest.raises(InputError):
        SpendRecord.from_json_dict(json_dict)


def test_records_are_hashable() -> None:
    json_dict = record_json(
        coin_id(1),
        [{"opcode": "AGG_SIG_ME", "vars": ["aa"]}],
        tags=["settlement_payments"],
        children=[record_json(coin_id(2), [{"opcode": "RESERVE_FEE", "vars": ["01"]}])],
    )
    record = SpendRecord.from_json_dict(json_dict)
    assert record.tags == ("settlement_payments",)
    assert {record, SpendRecord.from_json_dict(json_dict)} == {record}
