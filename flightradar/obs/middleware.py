"""Tool-call observability wrapper."""

from typing import Any, Awaitable, Callable, Optional
import functools
import time
import uuid

from mcp.shared.exceptions import McpError

from flightradar.obs.context import call_id_var, tool_name_var
from flightradar.obs.logger import log_event
from flightradar.obs.metrics import inc_counter, record_timing


def observe_tool_call(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
    """Wrap an async ``call_tool(self, name, arguments)`` method.

    Each call gets a fresh call id in context, a latency sample, an outcome
    counter and one ``tool_call`` log line. Outcomes are ``ok``,
    ``soft_error`` (result flagged ``isError``), ``protocol_error``
    (``McpError`` raised) and ``exception`` (anything else, re-raised).
    """

    @functools.wraps(func)
    async def wrapper(self, name: str, arguments: Optional[dict] = None):
        call_token = call_id_var.set(str(uuid.uuid4()))
        tool_token = tool_name_var.set(name)
        start = time.monotonic()
        outcome = "exception"
        try:
            result = await func(self, name, arguments)
            outcome = "soft_error" if getattr(result, "isError", False) else "ok"
            return result
        except McpError:
            outcome = "protocol_error"
            raise
        finally:
            elapsed_ms = (time.monotonic() - start) * 1000.0
            record_timing("tool_call_latency_ms", elapsed_ms, {"tool": name})
            inc_counter("tool_calls_total", {"tool": name, "outcome": outcome})
            log_event(
                "tool_call",
                level="ERROR" if outcome == "exception" else "INFO",
                outcome=outcome,
                ms_total=round(elapsed_ms, 2),
            )
            call_id_var.reset(call_token)
            tool_name_var.reset(tool_token)

    return wrapper
