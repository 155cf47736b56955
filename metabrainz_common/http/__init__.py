"""Public HTTP response helpers shared by MetaBrainz API clients."""

from .checks import (
    ResponseCheck,
    acheck_response,
    aensure_successful,
    check_response,
    ensure_successful,
)
from .content import (
    DEFAULT_ENCODING,
    aget_string_content,
    get_content_encoding,
    get_string_content,
)
from .errors import HttpError
from .headers import CONTENT_HEADER_NAMES, copy_headers, split_content_headers
from .status import is_success_status, status_name
from .tracing import get_http_tracer
from .user_agent import (
    UNKNOWN_PACKAGE_NAME,
    create_user_agent,
    user_agent_for,
    user_agent_headers,
)

__all__ = [
    "CONTENT_HEADER_NAMES",
    "DEFAULT_ENCODING",
    "HttpError",
    "ResponseCheck",
    "UNKNOWN_PACKAGE_NAME",
    "acheck_response",
    "aensure_successful",
    "aget_string_content",
    "check_response",
    "copy_headers",
    "create_user_agent",
    "ensure_successful",
    "get_content_encoding",
    "get_http_tracer",
    "get_string_content",
    "is_success_status",
    "split_content_headers",
    "status_name",
    "user_agent_for",
    "user_agent_headers",
]
