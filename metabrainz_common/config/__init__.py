"""Public API for configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_TRACER_NAME,
    CommonSettings,
    HttpSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_TRACER_NAME",
    "CommonSettings",
    "HttpSettings",
    "load_settings",
]
