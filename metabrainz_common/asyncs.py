"""Helpers for driving coroutines from blocking code and for cancellation.

Blocking entry points in this package are thin wrappers over their ``async``
counterparts. ``run_sync`` runs the coroutine on a private event loop in a
single worker thread, so it never re-enters the caller's own loop and is safe
to call while one is running.
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Coroutine, TypeVar

T = TypeVar("T")

_WORKER_PREFIX = "metabrainz-sync"


class OperationCancelledError(Exception):
    """Raised when a cancellation event interrupts an in-progress operation."""


def run_sync(coroutine: Coroutine[Any, Any, T]) -> T:
    """Run one coroutine to completion on a dedicated worker thread.

    The worker owns a fresh event loop for the duration of the call. Any
    exception raised by the coroutine is re-raised in the calling thread.
    """

    def _drive() -> T:
        return asyncio.run(coroutine)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix=_WORKER_PREFIX) as executor:
        future = executor.submit(_drive)
        return future.result()


def raise_if_cancelled(cancellation: threading.Event | None) -> None:
    """Raise ``OperationCancelledError`` when the cancellation event is set."""
    if cancellation is not None and cancellation.is_set():
        raise OperationCancelledError("operation was cancelled")
