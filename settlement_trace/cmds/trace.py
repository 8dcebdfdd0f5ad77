from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click


@click.command("trace", short_help="Find the coins asserted by each settlement payment in a snapshot")
@click.option(
    "--input",
    "-i",
    "input_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Block snapshot (JSON) to analyze. Defaults to trace.input_file from the config",
)
@click.option("--tag", "-t", default=None, help="Trace records carrying this tag. Defaults to trace.settlement_tag")
@click.option("--json", "json_output", is_flag=True, default=False, help="Print the result as JSON")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject announcement conditions with more than one var. Defaults to trace.strict_condition_vars",
)
@click.pass_context
def trace_cmd(
    ctx: click.Context, input_path: Optional[str], tag: Optional[str], json_output: bool, strict: Optional[bool]
) -> None:
    """
    Prints, for every record tagged as a settlement payment, the coins whose spends assert
    its announcements, directly or through other announcements.
    """
    from settlement_trace.util.errors import TraceError

    from .trace_funcs import trace_func

    try:
        trace_func(
            Path(ctx.obj["root_path"]),
            None if input_path is None else Path(input_path),
            tag,
            json_output=json_output,
            strict_vars=strict,
        )
    except (TraceError, ValueError) as e:
        print(f"FAILED: {e}")
        sys.exit(1)
