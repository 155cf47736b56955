"""Logging helpers for response tracing.

The library never configures handlers; it emits through standard ``logging``
loggers and attaches the current response fields to each record.
"""

from . import fields
from .context import context_extra, get_context, get_logger, log_context

__all__ = [
    "context_extra",
    "fields",
    "get_context",
    "get_logger",
    "log_context",
]
