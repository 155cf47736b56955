"""User agent strings identifying the client library making requests."""

from __future__ import annotations

from importlib import metadata
from types import ModuleType

UNKNOWN_PACKAGE_NAME = "*Unknown Package*"


def create_user_agent(product: str, version: str | None = None) -> str:
    """Return a ``product/version`` token, or just ``product`` without a version."""
    if not version:
        return product
    return f"{product}/{version}"


def user_agent_for(target: type | ModuleType | str) -> str:
    """Return a user agent naming the installed distribution that provides ``target``.

    ``target`` is a class, a module, or a distribution name. When no installed
    distribution can be found the name ``*Unknown Package*`` is used.
    """
    distribution = _distribution_name(target)
    if distribution is None:
        return UNKNOWN_PACKAGE_NAME
    try:
        dist = metadata.distribution(distribution)
    except metadata.PackageNotFoundError:
        return UNKNOWN_PACKAGE_NAME
    return create_user_agent(dist.metadata["Name"] or distribution, dist.version)


def user_agent_headers(target: type | ModuleType | str) -> dict[str, str]:
    """Return a ``User-Agent`` header mapping suitable for ``httpx.Client(headers=...)``."""
    return {"User-Agent": user_agent_for(target)}


def _distribution_name(target: type | ModuleType | str) -> str | None:
    if isinstance(target, str):
        return target
    module_name = target.__name__ if isinstance(target, ModuleType) else target.__module__
    top_level = module_name.partition(".")[0]
    distributions = metadata.packages_distributions().get(top_level)
    if not distributions:
        return None
    return distributions[0]
