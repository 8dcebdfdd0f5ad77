from __future__ import annotations

from collections.abc import Iterable

from settlement_trace.types.spend_record import SpendRecord


def flatten_spend_records(roots: Iterable[SpendRecord]) -> list[SpendRecord]:
    """
    Returns every record of the forest, roots first, then each level of children in the
    order they were reached. Parents always come before their own children.
    """
    records = list(roots)
    i = 0
    while i < len(records):
        records.extend(records[i].children)
        i += 1
    return records
