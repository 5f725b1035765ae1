"""Transport configuration with precedence resolution.

:func:`load_transport_config` merges, from highest to lowest precedence:

1. Keyword overrides passed by the caller.
2. Environment variables (``OAUTH2_HTTP_TIMEOUT``, ``OAUTH2_HTTP_VERIFY_SSL``,
   ``OAUTH2_HTTP_MAX_CONNECTIONS``, ``OAUTH2_HTTP_MAX_KEEPALIVE``).
3. A JSON config file, when a path is given.
4. Defaults declared on :class:`~oauth2_http_client.models.TransportConfig`.

The result only configures transports that build their own client (see
:meth:`~oauth2_http_client.transports.HttpxInterface.from_config`); the
adapter itself has nothing to configure.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from oauth2_http_client.exceptions import ConfigError
from oauth2_http_client.models import TransportConfig

ENV_PREFIX = "OAUTH2_HTTP_"

_ENV_FIELDS: dict[str, str] = {
    "TIMEOUT": "timeout",
    "VERIFY_SSL": "verify_ssl",
    "MAX_CONNECTIONS": "max_connections",
    "MAX_KEEPALIVE": "max_keepalive_connections",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def load_transport_config(
    path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> TransportConfig:
    """Resolve the effective :class:`TransportConfig`.

    Args:
        path: Optional JSON file holding a ``TransportConfig`` object.
            A missing file is an error; omit the argument to skip the
            file layer.
        **overrides: Field values that win over every other source.
            ``None`` values are ignored.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed, an environment
            variable is malformed, or the merged values fail validation.
    """
    values: dict[str, Any] = {}

    # 3. Config file
    if path is not None:
        values.update(_load_json_file(Path(path)))

    # 2. Environment
    values.update(_env_overrides())

    # 1. Explicit overrides
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return TransportConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid transport configuration: {exc}") from exc


def _load_json_file(path: Path) -> dict[str, Any]:
    """Read a JSON object from *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def _env_overrides() -> dict[str, Any]:
    """Collect configuration values from ``OAUTH2_HTTP_*`` environment variables."""
    values: dict[str, Any] = {}
    for suffix, field in _ENV_FIELDS.items():
        raw = os.environ.get(f"{ENV_PREFIX}{suffix}", "").strip()
        if not raw:
            continue
        if field == "verify_ssl":
            values[field] = _parse_bool(f"{ENV_PREFIX}{suffix}", raw)
        else:
            values[field] = raw
    return values


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {raw!r}")
