"""Structured JSON logging to stderr.

stdout belongs to the MCP stdio transport, so every event goes to stderr as
one compact JSON line.
"""

from typing import Any, Dict
from datetime import datetime, timezone
import json
import sys

from flightradar.config import settings
from flightradar.obs.context import call_id_var, tool_name_var


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}
_SECRET_FIELDS = {"access_key", "api_key", "aviationstack_api_key"}


def _redact_secret(value: Any) -> Any:
    s = str(value) if value is not None else ""
    if not s:
        return s
    if len(s) <= 4:
        return "***"
    return f"***{s[-4:]}"


def _scrub(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: _redact_secret(v) if str(k).lower() in _SECRET_FIELDS else _scrub(v)
            for k, v in value.items()
        }
    return value


def _enabled(level: str) -> bool:
    return _LEVELS.get(level, 20) >= _LEVELS.get(settings.LOG_LEVEL, 20)


def log_event(event: str, **fields: Any) -> None:
    level = str(fields.pop("level", "INFO")).upper()
    if not _enabled(level):
        return

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "event": event,
        "call_id": call_id_var.get(),
        "tool": tool_name_var.get(),
    }
    payload.update(_scrub(fields))

    try:
        print(json.dumps(payload, separators=(",", ":"), default=str), file=sys.stderr, flush=True)
    except (TypeError, ValueError, OSError):
        # Never let logging break a tool call
        pass
