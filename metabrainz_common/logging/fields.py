"""Structured field names attached to response trace records.

Handlers and formatters in client applications can rely on these attribute
names being present on records emitted while a response body is read.
"""

REQUEST_METHOD = "request_method"
REQUEST_URI = "request_uri"
STATUS_CODE = "status_code"

CONTENT_TYPE = "content_type"
CONTENT_LENGTH = "content_length"
CONTENT_ENCODING = "content_encoding"
