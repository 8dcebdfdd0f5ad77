from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from settlement_trace.types.spend_record import SpendRecord
from settlement_trace.util.errors import InputError

log = logging.getLogger(__name__)


def spend_records_from_json(data: Any, strict_vars: bool = False) -> list[SpendRecord]:
    if not isinstance(data, list):
        raise InputError(f"snapshot must be a list of spend records, got {type(data).__name__}")
    return [SpendRecord.from_json_dict(item, strict_vars) for item in data]


def load_snapshot(path: Path, strict_vars: bool = False) -> list[SpendRecord]:
    """
    Reads a block snapshot: a JSON list of spend records, each possibly carrying spent children.
    Returns the top level records; use `flatten_spend_records` to get every record.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise InputError(f"can't read {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputError(f"{path} is not valid JSON: {e}") from e

    records = spend_records_from_json(data, strict_vars)
    log.info(f"Loaded {len(records)} top level spend records from {path}")
    return records
