"""API domain configuration (endpoint, headers, token source)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import urlparse

from BvbrcApi.client.context import DEFAULT_BASE_URL
from BvbrcApi.config.common import (
    expect_optional_float,
    expect_str,
    expect_str_mapping,
    get_optional_value,
    get_section,
)

DEFAULT_TOKEN_ENV = "BVBRC_AUTH_TOKEN"


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Store validated endpoint settings.

    Attributes:
        base_url: Service root URL.
        auth_token_env: Environment variable holding the auth token.
        auth_token: Token resolved from the environment at load time.
        timeout: Optional transport timeout in seconds.
        headers: Extra request headers.
    """

    base_url: str = DEFAULT_BASE_URL
    auth_token_env: str = DEFAULT_TOKEN_ENV
    auth_token: str | None = None
    timeout: float | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    """Load API configuration from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed API configuration; the ``api`` section is optional.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "api", required=False)
    token_env = expect_str(get_optional_value(section, "auth_token_env", DEFAULT_TOKEN_ENV), "api.auth_token_env")
    return ApiConfig(
        base_url=expect_str(get_optional_value(section, "base_url", DEFAULT_BASE_URL), "api.base_url"),
        auth_token_env=token_env,
        auth_token=_load_auth_token(token_env),
        timeout=expect_optional_float(get_optional_value(section, "timeout", None), "api.timeout"),
        headers=expect_str_mapping(get_optional_value(section, "headers", {}), "api.headers"),
    )


def check_api(config: ApiConfig) -> None:
    """Validate API domain constraints.

    Args:
        config: Parsed API configuration.

    Raises:
        ValueError: If values violate API constraints.
    """
    parsed = urlparse(config.base_url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("api.base_url must be an http(s) URL")
    if config.timeout is not None and config.timeout <= 0:
        raise ValueError("api.timeout must be positive")
    if not config.auth_token_env.strip():
        raise ValueError("api.auth_token_env must not be empty")


def _load_auth_token(token_env: str) -> str | None:
    """Load the auth token from an environment variable."""
    return os.getenv(token_env, "").strip() or None
