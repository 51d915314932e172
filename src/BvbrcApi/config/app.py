from __future__ import annotations

"""Client config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from BvbrcApi.client.context import ExecutionContext, create_context
from BvbrcApi.config.api import ApiConfig, check_api, load_api
from BvbrcApi.config.runtime import RuntimeConfig, check_runtime, load_runtime


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Client root configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    def to_context(self, *, auth_token: str | None = None) -> ExecutionContext:
        """Build the ExecutionContext described by this config.

        Args:
            auth_token: Token overriding the one resolved from the environment.
        """
        return create_context(
            base_url=self.api.base_url,
            headers=self.api.headers,
            auth_token=auth_token or self.api.auth_token,
            timeout=self.api.timeout,
        )


def parse_config_dict(raw: Mapping[str, Any]) -> ClientConfig:
    """Parse normalized mapping into ClientConfig."""
    api = load_api(raw)
    runtime = load_runtime(raw)

    check_api(api)
    check_runtime(runtime)

    return ClientConfig(api=api, runtime=runtime)


def load_client_config(path: Path | None = None, *, dotenv: bool = True) -> ClientConfig:
    """Load client config from an optional YAML file.

    Environment variables from a ``.env`` file are loaded first so the token
    variable named in ``api.auth_token_env`` can be resolved.

    Args:
        path: YAML config path; ``None`` uses built-in defaults.
        dotenv: Whether to load ``.env`` before resolving the token.

    Returns:
        Validated ClientConfig.
    """
    if dotenv:
        load_dotenv()
    raw = parse_yaml(path.read_text(encoding="utf-8")) if path is not None else {}
    return parse_config_dict(raw)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)
