from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar, final

from chia_rs.sized_bytes import bytes32
from chia_rs.sized_ints import uint64

from settlement_trace.types.condition_opcodes import ConditionOpcode
from settlement_trace.util.byte_types import hexstr_to_bytes, hexstr_to_bytes32
from settlement_trace.util.errors import InputError, InvalidCondition

log = logging.getLogger(__name__)

_T_Condition = TypeVar("_T_Condition", bound="Condition")


def _vars_from_json_dict(json_dict: dict[str, Any], opcode: ConditionOpcode) -> list[str]:
    vars = json_dict.get("vars")
    if not isinstance(vars, list) or not all(isinstance(var, str) for var in vars):
        raise InputError(f"{opcode.name} vars must be a list of hex strings, got {vars!r}")
    return vars


def _single_var(json_dict: dict[str, Any], opcode: ConditionOpcode, strict_vars: bool) -> str:
    """
    Announcement conditions carry exactly one meaningful argument. An empty list is always
    malformed; extra arguments are rejected in strict mode and dropped with a warning otherwise.
    """
    vars = _vars_from_json_dict(json_dict, opcode)
    if len(vars) == 0:
        raise InvalidCondition(f"{opcode.name} has no vars")
    if len(vars) > 1:
        if strict_vars:
            raise InvalidCondition(f"{opcode.name} has {len(vars)} vars, expected 1")
        log.warning(f"{opcode.name} has {len(vars)} vars, ignoring all but the first")
    return vars[0]


def _parse_bytes(input_str: str, opcode: ConditionOpcode) -> bytes:
    try:
        return hexstr_to_bytes(input_str)
    except ValueError as e:
        raise InputError(f"{opcode.name}: invalid hex {input_str!r}: {e}") from e


def _parse_bytes32(input_str: str, opcode: ConditionOpcode) -> bytes32:
    try:
        return hexstr_to_bytes32(input_str)
    except ValueError as e:
        raise InputError(f"{opcode.name}: invalid bytes32 {input_str!r}: {e}") from e


class Condition(ABC):
    opcode: ClassVar[ConditionOpcode]

    @classmethod
    @abstractmethod
    def from_json_dict(cls: type[_T_Condition], json_dict: dict[str, Any], strict_vars: bool = False) -> _T_Condition:
        ...


@final
@dataclass(frozen=True)
class CreateCoinAnnouncement(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.CREATE_COIN_ANNOUNCEMENT

    msg: bytes

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> CreateCoinAnnouncement:
        return cls(_parse_bytes(_single_var(json_dict, cls.opcode, strict_vars), cls.opcode))


@final
@dataclass(frozen=True)
class CreatePuzzleAnnouncement(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.CREATE_PUZZLE_ANNOUNCEMENT

    msg: bytes

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> CreatePuzzleAnnouncement:
        return cls(_parse_bytes(_single_var(json_dict, cls.opcode, strict_vars), cls.opcode))


@final
@dataclass(frozen=True)
class AssertCoinAnnouncement(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.ASSERT_COIN_ANNOUNCEMENT

    announcement_id: bytes32

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> AssertCoinAnnouncement:
        return cls(_parse_bytes32(_single_var(json_dict, cls.opcode, strict_vars), cls.opcode))


@final
@dataclass(frozen=True)
class AssertPuzzleAnnouncement(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.ASSERT_PUZZLE_ANNOUNCEMENT

    announcement_id: bytes32

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> AssertPuzzleAnnouncement:
        return cls(_parse_bytes32(_single_var(json_dict, cls.opcode, strict_vars), cls.opcode))


@final
@dataclass(frozen=True)
class CreateCoin(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.CREATE_COIN

    puzzle_hash: bytes32
    amount: uint64
    child_coin_id: bytes32
    address: str

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> CreateCoin:
        try:
            return cls(
                _parse_bytes32(json_dict["send_puzzle"], cls.opcode),
                uint64(json_dict["amt"]),
                _parse_bytes32(json_dict["child_coin_name"], cls.opcode),
                str(json_dict["send_address"]),
            )
        except KeyError as e:
            raise InputError(f"{cls.opcode.name} is missing {e.args[0]!r}") from e
        except (AttributeError, TypeError, ValueError) as e:
            raise InputError(f"{cls.opcode.name}: {e}") from e


@final
@dataclass(frozen=True)
class AssertMyCoinId(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.ASSERT_MY_COIN_ID

    coin_id: bytes32

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> AssertMyCoinId:
        return cls(_parse_bytes32(_single_var(json_dict, cls.opcode, strict_vars), cls.opcode))


@final
@dataclass(frozen=True)
class AggSigMe(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.AGG_SIG_ME

    vars: tuple[bytes, ...]

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> AggSigMe:
        return cls(tuple(_parse_bytes(var, cls.opcode) for var in _vars_from_json_dict(json_dict, cls.opcode)))


@final
@dataclass(frozen=True)
class ReserveFee(Condition):
    opcode: ClassVar[ConditionOpcode] = ConditionOpcode.RESERVE_FEE

    vars: tuple[bytes, ...]

    @classmethod
    def from_json_dict(cls, json_dict: dict[str, Any], strict_vars: bool = False) -> ReserveFee:
        return cls(tuple(_parse_bytes(var, cls.opcode) for var in _vars_from_json_dict(json_dict, cls.opcode)))


CONDITION_DRIVERS: dict[ConditionOpcode, type[Condition]] = {
    ConditionOpcode.CREATE_COIN_ANNOUNCEMENT: CreateCoinAnnouncement,
    ConditionOpcode.CREATE_PUZZLE_ANNOUNCEMENT: CreatePuzzleAnnouncement,
    ConditionOpcode.ASSERT_COIN_ANNOUNCEMENT: AssertCoinAnnouncement,
    ConditionOpcode.ASSERT_PUZZLE_ANNOUNCEMENT: AssertPuzzleAnnouncement,
    ConditionOpcode.CREATE_COIN: CreateCoin,
    ConditionOpcode.ASSERT_MY_COIN_ID: AssertMyCoinId,
    ConditionOpcode.AGG_SIG_ME: AggSigMe,
    ConditionOpcode.RESERVE_FEE: ReserveFee,
}


def condition_from_json_dict(json_dict: dict[str, Any], strict_vars: bool = False) -> Condition:
    if not isinstance(json_dict, dict):
        raise InputError(f"condition must be an object, got {json_dict!r}")
    opcode_specified = json_dict.get("opcode")
    if not isinstance(opcode_specified, str):
        raise InputError(f"condition has no opcode: {json_dict!r}")
    try:
        opcode = ConditionOpcode[opcode_specified]
    except KeyError:
        raise InputError(f"unknown condition opcode {opcode_specified!r}")
    return CONDITION_DRIVERS[opcode].from_json_dict(json_dict, strict_vars)


def conditions_from_json_dicts(conditions: Iterable[dict[str, Any]], strict_vars: bool = False) -> list[Condition]:
    return [condition_from_json_dict(condition, strict_vars) for condition in conditions]
