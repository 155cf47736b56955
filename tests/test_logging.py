"""Unit tests for response logging context helpers."""

from __future__ import annotations

import asyncio
import logging

import pytest

from metabrainz_common.logging import (
    context_extra,
    fields,
    get_context,
    get_logger,
    log_context,
)


def test_log_context_binds_stringified_fields_and_skips_none() -> None:
    """Bound values are stringified and ``None`` leaves a field unbound."""
    with log_context(
        request_uri="https://musicbrainz.test/", status_code=404, skipped=None
    ) as bound:
        assert dict(bound) == {
            "request_uri": "https://musicbrainz.test/",
            "status_code": "404",
        }
        assert get_context() == dict(bound)

    assert get_context() == {}


def test_log_context_nests_and_restores_outer_fields() -> None:
    """Inner blocks override outer fields only until they exit."""
    with log_context(request_uri="https://musicbrainz.test/ws/2/", status_code=200):
        with log_context(status_code=503):
            assert get_context() == {
                "request_uri": "https://musicbrainz.test/ws/2/",
                "status_code": "503",
            }
        assert get_context()["status_code"] == "200"


def test_log_context_yields_read_only_mapping() -> None:
    """The yielded fields cannot be mutated behind the context's back."""
    with log_context(request_method="GET") as bound:
        with pytest.raises(TypeError):
            bound["request_method"] = "POST"  # type: ignore[index]


def test_log_context_is_isolated_between_tasks() -> None:
    """Concurrent reads never observe each other's response fields."""

    async def _read(uri: str) -> str:
        with log_context(request_uri=uri):
            await asyncio.sleep(0)
            return get_context()["request_uri"]

    async def _run() -> list[str]:
        results = await asyncio.gather(_read("https://a.test/"), _read("https://b.test/"))
        return list(results)

    assert asyncio.run(_run()) == ["https://a.test/", "https://b.test/"]


def test_context_extra_merges_bound_fields_with_record_values() -> None:
    """Record-specific values are layered over the bound response fields."""
    with log_context(**{fields.REQUEST_URI: "https://musicbrainz.test/ws/2/"}):
        extra = context_extra(
            **{fields.CONTENT_TYPE: "application/json", fields.CONTENT_LENGTH: None}
        )

    assert extra == {
        "request_uri": "https://musicbrainz.test/ws/2/",
        "content_type": "application/json",
        "content_length": None,
    }
    assert context_extra() == {}


def test_context_extra_fields_land_on_log_records(caplog: pytest.LogCaptureFixture) -> None:
    """Fields passed through ``extra=`` become record attributes."""
    logger = get_logger("tests.logging.records")
    caplog.set_level(logging.DEBUG, logger="tests.logging.records")

    with log_context(request_method="GET", status_code=404):
        logger.debug("RESPONSE TEXT: %s", "<<>>", extra=context_extra())

    (record,) = caplog.records
    assert getattr(record, "request_method") == "GET"
    assert getattr(record, "status_code") == "404"


def test_get_logger_uses_standard_hierarchy() -> None:
    """Loggers come from the standard logging module."""
    assert get_logger("metabrainz_common.http") is logging.getLogger("metabrainz_common.http")
