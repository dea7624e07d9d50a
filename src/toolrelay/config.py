"""Configuration for the model gateway.

GatewayConfig holds request and transport settings. The API key is resolved
separately so that a missing credential fails before any network call.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

from toolrelay.exceptions import ConfigurationError

DEFAULT_MODEL = "claude-3-7-sonnet-20250219"
DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_VERSION = "2023-06-01"
TOOLS_BETA = "tools-2024-04-04"

# Checked in order; the first non-blank value wins.
API_KEY_ENV_VARS = ("TOOLRELAY_API_KEY", "ANTHROPIC_API_KEY")


class GatewayConfig(BaseModel):
    """Request and transport settings for AnthropicGateway.

    Example::

        from toolrelay import GatewayConfig
        config = GatewayConfig(model="claude-3-5-haiku-latest", max_tokens=512)
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str = DEFAULT_MODEL
    max_tokens: int = 1024
    base_url: str = DEFAULT_BASE_URL
    api_version: str = ANTHROPIC_VERSION
    beta: Optional[str] = TOOLS_BETA  # None = no anthropic-beta header
    timeout: float = 60.0
    max_retries: int = 1  # total attempts; 1 = no retry

    @classmethod
    def from_env(cls, **overrides: object) -> GatewayConfig:
        """Build a config from TOOLRELAY_* environment variables.

        Explicit keyword overrides take precedence over the environment.

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed.
        """
        values: dict[str, object] = {}
        if base_url := os.environ.get("TOOLRELAY_BASE_URL"):
            values["base_url"] = base_url.rstrip("/")
        if model := os.environ.get("TOOLRELAY_MODEL"):
            values["model"] = model
        for var, key, cast in (
            ("TOOLRELAY_MAX_TOKENS", "max_tokens", int),
            ("TOOLRELAY_TIMEOUT", "timeout", float),
        ):
            raw = os.environ.get(var)
            if not raw:
                continue
            try:
                values[key] = cast(raw)
            except ValueError:
                raise ConfigurationError(
                    f"{var} must be a number, got {raw!r}"
                ) from None
        values.update(overrides)
        return cls(**values)


def resolve_api_key(api_key: str | None = None) -> str:
    """Return the API key from the argument or the environment.

    Raises:
        ConfigurationError: If no non-blank key is available.
    """
    if api_key and api_key.strip():
        return api_key.strip()
    for var in API_KEY_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            return value
    raise ConfigurationError(
        "No API key provided. Pass api_key= or set one of "
        f"{', '.join(API_KEY_ENV_VARS)}."
    )
