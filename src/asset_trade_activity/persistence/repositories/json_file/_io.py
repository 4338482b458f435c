"""Shared JSON file loading for file-backed sources."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from asset_trade_activity.exceptions import SourceIOError


def load_json(path: Path, *, source: str) -> Any:
    """Read and decode a JSON file.

    Raises:
        SourceIOError: if the file cannot be read or is not valid JSON.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise SourceIOError(
            f"source I/O error: cannot read {path}", source=source, cause=e
        ) from e
    except json.JSONDecodeError as e:
        raise SourceIOError(
            f"source I/O error: invalid JSON in {path} (line {e.lineno})",
            source=source,
            cause=e,
        ) from e
