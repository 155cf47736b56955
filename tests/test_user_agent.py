"""Unit tests for user agent construction."""

from __future__ import annotations

from importlib import metadata

import httpx

from metabrainz_common.http import (
    UNKNOWN_PACKAGE_NAME,
    create_user_agent,
    user_agent_for,
    user_agent_headers,
)


def test_create_user_agent_with_and_without_version() -> None:
    """Versions are appended after a slash only when known."""
    assert create_user_agent("MetaBrainz.MusicBrainz", "6.1.0") == "MetaBrainz.MusicBrainz/6.1.0"
    assert create_user_agent("MetaBrainz.MusicBrainz") == "MetaBrainz.MusicBrainz"


def test_user_agent_for_distribution_name() -> None:
    """Installed distributions are reported with their version."""
    assert user_agent_for("httpx") == f"httpx/{metadata.version('httpx')}"


def test_user_agent_for_class_uses_providing_distribution() -> None:
    """Classes resolve to the distribution that installed their module."""
    assert user_agent_for(httpx.Client) == f"httpx/{metadata.version('httpx')}"
    assert user_agent_for(httpx) == user_agent_for(httpx.Client)


def test_user_agent_for_unknown_distribution() -> None:
    """Unknown distributions fall back to the placeholder name."""
    assert user_agent_for("no-such-distribution-for-tests") == UNKNOWN_PACKAGE_NAME


def test_user_agent_headers_mapping() -> None:
    """The header helper builds a mapping usable by httpx clients."""
    headers = user_agent_headers("httpx")

    with httpx.Client(headers=headers) as client:
        assert client.headers["user-agent"] == headers["User-Agent"]
