from __future__ import annotations

import os
from pathlib import Path

DEFAULT_ROOT_PATH = Path(os.path.expanduser(os.getenv("SETTLEMENT_TRACE_ROOT", "~/.settlement_trace"))).resolve()
