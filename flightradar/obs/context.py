"""Tool-call context carried through ContextVars.

The MCP session handles one call at a time, but the values still live in
ContextVars so logging deep in the HTTP client picks up the active call.
"""

from contextvars import ContextVar
from typing import Optional


call_id_var: ContextVar[Optional[str]] = ContextVar("call_id", default=None)
tool_name_var: ContextVar[Optional[str]] = ContextVar("tool_name", default=None)


def clear_context() -> None:
    """Reset context variables to defaults."""
    call_id_var.set(None)
    tool_name_var.set(None)
