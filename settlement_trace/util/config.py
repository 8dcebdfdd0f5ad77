from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Optional, Union, cast

import importlib_resources
import yaml

log = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"


def initial_config_file(filename: Union[str, Path]) -> str:
    initial_config_path = importlib_resources.files(__name__.rpartition(".")[0]).joinpath(f"initial-{filename}")
    contents: str = initial_config_path.read_text(encoding="utf-8")
    return contents


def config_path_for_filename(root_path: Path, filename: Union[str, Path]) -> Path:
    path_filename = Path(filename)
    if path_filename.is_absolute():
        return path_filename
    return root_path / "config" / filename


def create_default_config(root_path: Path, filename: str = CONFIG_FILENAME) -> Path:
    default_config_file_data: str = initial_config_file(filename)
    path: Path = config_path_for_filename(root_path, filename)
    tmp_path: Path = path.with_suffix("." + str(os.getpid()))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp_path, "w") as f:
        f.write(default_config_file_data)
    try:
        os.replace(str(tmp_path), str(path))
    except PermissionError:
        shutil.move(str(tmp_path), str(path))
    return path


def load_defaults(filename: str = CONFIG_FILENAME) -> dict[str, Any]:
    return cast(dict[str, Any], yaml.safe_load(initial_config_file(filename)))


def load_config(
    root_path: Path,
    filename: Union[str, Path] = CONFIG_FILENAME,
    sub_config: Optional[str] = None,
) -> dict[str, Any]:
    """
    Loads the config from the root path, falling back to the packaged defaults when the root
    has no config yet. Keys missing from the file are filled in from the defaults.
    """
    defaults = load_defaults()
    path = config_path_for_filename(root_path, filename)
    if not path.is_file():
        log.debug(f"can't find {path}, using default config")
        r = defaults
    else:
        try:
            with open(path) as opened_config_file:
                loaded = yaml.safe_load(opened_config_file)
        except yaml.YAMLError as e:
            raise ValueError(f"can't parse {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} does not contain a mapping")
        r = merge_defaults(loaded, defaults)
    if sub_config is not None:
        r = cast(dict[str, Any], r.get(sub_config))
    return r


def merge_defaults(config: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    merged = dict(config)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict):
            if not isinstance(merged[key], dict):
                raise ValueError(f"{key} must be a mapping")
            merged[key] = merge_defaults(merged[key], value)
    return merged


def str2bool(v: Union[str, bool]) -> bool:
    # Source from https://stackoverflow.com/questions/15008758/parsing-boolean-values-with-argparse
    if isinstance(v, bool):
        return v
    if v.lower() in ("yes", "true", "t", "y", "1"):
        return True
    elif v.lower() in ("no", "false", "f", "n", "0"):
        return False
    raise ValueError("Boolean value expected.")
