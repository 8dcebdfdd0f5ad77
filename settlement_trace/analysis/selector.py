from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chia_rs.sized_bytes import bytes32

from settlement_trace.analysis.announcement_index import AnnouncementIndex, build_announcement_index
from settlement_trace.analysis.flatten import flatten_spend_records
from settlement_trace.analysis.reachability import coins_asserted_by
from settlement_trace.types.spend_record import SpendRecord

log = logging.getLogger(__name__)

SETTLEMENT_PAYMENTS_TAG = "settlement_payments"


@dataclass(frozen=True)
class SettlementTrace:
    coin_id: bytes32
    asserted_coins: frozenset[bytes32]


def select_settlement_payments(
    records: Iterable[SpendRecord], tag: str = SETTLEMENT_PAYMENTS_TAG
) -> Iterator[SpendRecord]:
    for record in records:
        if record.has_tag(tag):
            yield record


def trace_settlement_payments(
    records: Iterable[SpendRecord], index: AnnouncementIndex, tag: str = SETTLEMENT_PAYMENTS_TAG
) -> list[SettlementTrace]:
    traces: list[SettlementTrace] = []
    for record in select_settlement_payments(records, tag):
        asserted = coins_asserted_by(record.coin_id, index)
        log.debug(f"Coin {record.coin_id.hex()} is asserted by {len(asserted)} coins")
        traces.append(SettlementTrace(record.coin_id, frozenset(asserted)))
    return traces


def run_trace(roots: Iterable[SpendRecord], tag: str = SETTLEMENT_PAYMENTS_TAG) -> list[SettlementTrace]:
    """
    Flattens the snapshot, builds the announcement index once and traces every record tagged `tag`.
    """
    records = flatten_spend_records(roots)
    index = build_announcement_index(records)
    traces = trace_settlement_payments(records, index, tag)
    log.info(f"Traced {len(traces)} of {len(records)} spend records tagged {tag!r}")
    return traces
