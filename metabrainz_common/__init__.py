"""Shared low-level helpers for MetaBrainz HTTP API client libraries."""

from .asyncs import OperationCancelledError, run_sync
from .http import (
    HttpError,
    ResponseCheck,
    acheck_response,
    aensure_successful,
    aget_string_content,
    check_response,
    ensure_successful,
    get_content_encoding,
    get_string_content,
)
from .text import format_multiline
from .unixtime import from_unix_time, to_unix_time

__all__ = [
    "HttpError",
    "OperationCancelledError",
    "ResponseCheck",
    "acheck_response",
    "aensure_successful",
    "aget_string_content",
    "check_response",
    "ensure_successful",
    "format_multiline",
    "from_unix_time",
    "get_content_encoding",
    "get_string_content",
    "run_sync",
    "to_unix_time",
]
