from __future__ import annotations

from enum import Enum
from typing import Optional


class Err(Enum):
    UNKNOWN = 1

    # the snapshot could not be read or is not in the expected structural form
    INPUT_ERROR = 2
    # a puzzle announcement was created by a record without a puzzle hash
    MISSING_FIELD = 3
    # an announcement condition carries no payload, or too many in strict mode
    INVALID_CONDITION = 4


class TraceError(Exception):
    code: Err = Err.UNKNOWN

    def __init__(self, error_msg: str = "", code: Optional[Err] = None):
        if code is not None:
            self.code = code
        super().__init__(f"Error code: {self.code.name} {error_msg}")
        self.error_msg = error_msg


class InputError(TraceError):
    code = Err.INPUT_ERROR


class MissingField(TraceError):
    code = Err.MISSING_FIELD

    def __init__(self, field_name: str, error_msg: str = ""):
        super().__init__(f"missing {field_name}: {error_msg}" if error_msg else f"missing {field_name}")
        self.field_name = field_name


class InvalidCondition(TraceError):
    code = Err.INVALID_CONDITION
