from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from settlement_trace.util.config import create_default_config


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture(scope="function")
def tmp_trace_root(tmp_path: Path) -> Path:
    """
    Create a temp directory and populate it with an empty settlement_trace root directory.
    """
    path: Path = tmp_path / "trace_root"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture(scope="function")
def root_path_populated_with_config(tmp_trace_root: Path) -> Path:
    """
    Create a temp root directory and populate it with a default config.yaml.
    Returns the root path.
    """
    root_path: Path = tmp_trace_root
    create_default_config(root_path)
    return root_path
