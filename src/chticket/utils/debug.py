"""Opt-in request/response log, one JSON record per line."""

import json
import time
from pathlib import Path
from typing import Any

from chticket.ui.output import GRAY, MAGENTA, NC

DEBUG_LOG = Path.home() / ".config" / "chticket" / "debug.log"


def _decode(data: Any) -> Any:
    """Strings holding JSON are stored as the decoded value."""
    if isinstance(data, str):
        try:
            return json.loads(data)
        except json.JSONDecodeError:
            return data
    return data


def debug_log(settings: dict, event: str, data: Any) -> None:
    """Append {"time", "event", "data"} to DEBUG_LOG when settings["debug"] is on."""
    if not settings.get("debug"):
        return

    record = {
        "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime()),
        "event": event,
        "data": _decode(data),
    }
    DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
    with open(DEBUG_LOG, "a") as f:
        f.write(json.dumps(record, default=str) + "\n")
    print(f"{MAGENTA}[debug]{NC} {event} {GRAY}-> {DEBUG_LOG}{NC}")
