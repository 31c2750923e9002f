"""
JSON-line events for the CLI and bulk scans.

Each event is one line on stdout with sorted keys, so tests and log
shippers can parse output line by line.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

_LEVELS = ("debug", "info", "warning", "error")


def emit_json_event(
    event_type: str,
    *,
    run_id: str | None,
    level: str = "info",
    **payload: Any,
) -> str:
    """Print one event and return the rendered line."""
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {level} (expected one of {', '.join(_LEVELS)})")
    line = json.dumps(
        {
            **payload,
            "event_type": event_type,
            "level": level,
            "run_id": run_id,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        ensure_ascii=True,
        sort_keys=True,
        default=str,
    )
    print(line, flush=True)
    return line
