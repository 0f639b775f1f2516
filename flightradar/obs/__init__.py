"""Observability for tool calls.

Request-scoped context, structured JSON logging to stderr, in-process
metrics and the tool-call wrapper that ties them together.
"""

__all__ = [
    "context",
    "logger",
    "metrics",
    "middleware",
]
