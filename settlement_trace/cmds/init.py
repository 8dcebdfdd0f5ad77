from __future__ import annotations

from pathlib import Path

import click


@click.command("init", short_help="Create the default configuration")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite an existing configuration")
@click.pass_context
def init_cmd(ctx: click.Context, force: bool) -> None:
    from settlement_trace.util.config import CONFIG_FILENAME, config_path_for_filename, create_default_config

    root_path = Path(ctx.obj["root_path"])
    path = config_path_for_filename(root_path, CONFIG_FILENAME)
    if path.exists() and not force:
        print(f"{path} already exists, use --force to overwrite")
        return
    create_default_config(root_path)
    print(f"Wrote default config to {path}")
