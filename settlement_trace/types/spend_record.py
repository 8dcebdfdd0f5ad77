from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from chia_rs.sized_bytes import bytes32

from settlement_trace.types.conditions import Condition, conditions_from_json_dicts
from settlement_trace.util.byte_types import hexstr_to_bytes32
from settlement_trace.util.errors import InputError


@dataclass(frozen=True)
class SpendRecord:
    """
    One coin in a block snapshot, together with the conditions its spend produced
    and the records of any of its children that were spent in the same snapshot.
    """

    coin_id: bytes32
    puzzle_hash: Optional[bytes32]
    type: str
    tags: Optional[tuple[str, ...]]
    spent: bool
    conditions: tuple[Condition, ...] = ()
    children: tuple[SpendRecord, ...] = field(default=(), repr=False)

    def has_tag(self, tag: str) -> bool:
        return tag in (self.tags or ())

    @staticmethod
    def from_json_dict(json_dict: dict[str, Any], strict_vars: bool = False) -> SpendRecord:
        if not isinstance(json_dict, dict):
            raise InputError(f"spend record must be an object, got {type(json_dict).__name__}")
        try:
            coin_id = hexstr_to_bytes32(json_dict["Coin"])
            puzzle_hash_str = json_dict.get("Coin_puzzle_hash")
            puzzle_hash = None if puzzle_hash_str is None else hexstr_to_bytes32(puzzle_hash_str)
            tags = json_dict.get("Tags")
            if tags is not None and (not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags)):
                raise InputError(f"Tags of {json_dict['Coin']} must be a list of strings")
            spent = json_dict["Spend"]
            if not isinstance(spent, bool):
                raise InputError(f"Spend of {json_dict['Coin']} must be a boolean, got {spent!r}")
            conditions = json_dict["Conditions"]
            children = json_dict["Children"]
            if not isinstance(conditions, list) or not isinstance(children, list):
                raise InputError(f"Conditions and Children of {json_dict['Coin']} must be lists")
            return SpendRecord(
                coin_id,
                puzzle_hash,
                str(json_dict["Type"]),
                None if tags is None else tuple(tags),
                spent,
                tuple(conditions_from_json_dicts(conditions, strict_vars)),
                tuple(SpendRecord.from_json_dict(child, strict_vars) for child in children),
            )
        except KeyError as e:
            raise InputError(f"spend record is missing {e.args[0]!r}") from e
        except (AttributeError, TypeError, ValueError) as e:
            raise InputError(f"malformed spend record: {e}") from e
