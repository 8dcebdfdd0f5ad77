from __future__ import annotations

import click

from settlement_trace import __version__
from settlement_trace.cmds.init import init_cmd
from settlement_trace.cmds.trace import trace_cmd
from settlement_trace.util.default_root import DEFAULT_ROOT_PATH

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(
    help=f"\n  Trace settlement payments through coin and puzzle announcements ({__version__})\n",
    epilog="Try 'settlement_trace trace --input block.json'",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--root-path", default=DEFAULT_ROOT_PATH, help="Config file root", type=click.Path(), show_default=True)
@click.pass_context
def cli(ctx: click.Context, root_path: str) -> None:
    from pathlib import Path

    ctx.ensure_object(dict)
    ctx.obj["root_path"] = Path(root_path)


@cli.command("version", help="Show settlement_trace version")
def version_cmd() -> None:
    print(__version__)


cli.add_command(init_cmd)
cli.add_command(trace_cmd)


def main() -> None:
    cli()  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
