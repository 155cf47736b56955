"""Settings loading with deterministic precedence.

The cascade is always:
1) explicit parameters
2) environment variables
3) the YAML config file (``~/.config/metabrainz/common.yaml`` by default)
4) built-in model defaults

Environment variable format:
- Prefix: ``METABRAINZ_``
- Nested keys: ``__`` separator
- Example: ``METABRAINZ_HTTP__TRACE=true`` -> ``http.trace = True``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import CommonSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> CommonSettings:
    """Resolve settings from parameters, environment and an optional YAML file."""
    init = dict(cli_params or {})
    if config_path is None:
        return CommonSettings(**init)

    resolved = Path(config_path)

    class _FileSettings(CommonSettings):
        _config_path: ClassVar[Path] = resolved

    return _FileSettings(**init)
