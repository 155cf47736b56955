"""Per-response logging context.

Fields describing the response being read (request method and URI, status
code) are held in a ``contextvars`` variable for the duration of the read, so
every trace record emitted inside it carries them, and concurrent reads on
other tasks or threads never see each other's values.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_RESPONSE_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "metabrainz_response_context", default=MappingProxyType({})
)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound for the current response read."""
    return dict(_RESPONSE_CONTEXT.get())


@contextmanager
def log_context(**values: object) -> Iterator[Mapping[str, str]]:
    """Bind response fields on top of the current ones until the block exits.

    Values are stringified; ``None`` leaves a field unbound. The merged,
    read-only mapping is yielded.
    """
    merged = dict(_RESPONSE_CONTEXT.get())
    for key, value in values.items():
        if value is not None:
            merged[key] = str(value)
    bound = MappingProxyType(merged)
    token = _RESPONSE_CONTEXT.set(bound)
    try:
        yield bound
    finally:
        _RESPONSE_CONTEXT.reset(token)


def context_extra(**values: object) -> dict[str, object]:
    """Return an ``extra=`` mapping: the bound fields updated with ``values``."""
    extra: dict[str, object] = dict(_RESPONSE_CONTEXT.get())
    extra.update(values)
    return extra


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard logging hierarchy."""
    return logging.getLogger(name)
