"""Runtime settings read from environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

from search_wire.query import validate_dialect

_DEFAULT_URL = "redis://localhost:6379/0"
_DEFAULT_TIMEOUT_S = 30.0

URL_ENV_VAR = "SEARCH_WIRE_URL"
TIMEOUT_ENV_VAR = "SEARCH_WIRE_TIMEOUT_S"
DEFAULT_DIALECT_ENV_VAR = "SEARCH_WIRE_DEFAULT_DIALECT"


def env_int(name: str, *, default_value: int | None) -> int | None:
    """Read an integer value from environment variables.

    Args:
        name (str): Environment variable name.
        default_value (int | None): Fallback value when missing or invalid.

    Returns:
        int | None: Parsed integer value.

    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default_value
    try:
        return int(raw.strip())
    except ValueError:
        return default_value


def env_float(name: str, *, default_value: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default_value
    try:
        return float(raw.strip())
    except ValueError:
        return default_value


class SearchSettings(BaseModel):
    """Represent connection and compilation settings.

    Args:
        url (str): Server URL used when no client is injected.
        timeout_s (float): Socket timeout in seconds.
        default_dialect (int | None): Dialect applied to requests that set none.

    """

    model_config = ConfigDict(frozen=True)

    url: str = _DEFAULT_URL
    timeout_s: float = _DEFAULT_TIMEOUT_S
    default_dialect: int | None = None


def settings_from_env() -> SearchSettings:
    """Build settings from ``SEARCH_WIRE_*`` environment variables.

    Raises:
        InvalidDialectError: If the default dialect variable is ``0``.

    Returns:
        SearchSettings: Settings with environment overrides applied.

    """
    default_dialect = env_int(DEFAULT_DIALECT_ENV_VAR, default_value=None)
    if default_dialect is not None:
        validate_dialect(default_dialect)
    return SearchSettings(
        url=os.getenv(URL_ENV_VAR, _DEFAULT_URL),
        timeout_s=env_float(TIMEOUT_ENV_VAR, default_value=_DEFAULT_TIMEOUT_S),
        default_dialect=default_dialect,
    )
