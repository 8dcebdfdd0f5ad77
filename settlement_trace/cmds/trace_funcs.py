from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

from settlement_trace.analysis.selector import SettlementTrace, run_trace
from settlement_trace.util.config import load_config, str2bool
from settlement_trace.util.json_util import dict_to_json_str
from settlement_trace.util.snapshot import load_snapshot
from settlement_trace.util.trace_logging import initialize_logging

log = logging.getLogger(__name__)


def format_trace(trace: SettlementTrace) -> str:
    asserted = ", ".join(f"0x{coin_id.hex()}" for coin_id in sorted(trace.asserted_coins))
    return f"Coin 0x{trace.coin_id.hex()} is asserted by {{{asserted}}}"


def traces_to_json_dicts(traces: Iterable[SettlementTrace]) -> list[dict[str, Any]]:
    return [{"coin_id": trace.coin_id, "asserted_by": trace.asserted_coins} for trace in traces]


def trace_func(
    root_path: Path,
    input_path: Optional[Path] = None,
    tag: Optional[str] = None,
    json_output: bool = False,
    strict_vars: Optional[bool] = None,
) -> list[SettlementTrace]:
    config = load_config(root_path, sub_config="trace")
    initialize_logging("trace", config["logging"], root_path)

    if input_path is None:
        input_path = Path(config["input_file"])
    if tag is None:
        tag = str(config["settlement_tag"])
    if strict_vars is None:
        strict_vars = str2bool(config["strict_condition_vars"])

    log.info(f"Tracing {tag!r} records in {input_path}")
    records = load_snapshot(input_path, strict_vars)
    traces = run_trace(records, tag)

    if json_output:
        print(dict_to_json_str(traces_to_json_dicts(traces)))
    else:
        for trace in traces:
            print(format_trace(trace))
    return traces
