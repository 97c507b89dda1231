"""Environment-variable-based configuration for the tracker CLI."""

from __future__ import annotations

import os
from pathlib import Path

DATA_FILE: Path = Path(
    os.environ.get("MTP_DATA_FILE", "~/.matrix_training/history.json")
).expanduser()
_history_limit = os.environ.get("MTP_HISTORY_LIMIT", "").strip()
HISTORY_LIMIT: int | None = int(_history_limit) if _history_limit else None
LOG_LEVEL: str = os.environ.get("MTP_LOG_LEVEL", "INFO").upper()
