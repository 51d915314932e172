from __future__ import annotations

"""Public configuration API for BvbrcApi."""

from BvbrcApi.config.api import ApiConfig
from BvbrcApi.config.app import ClientConfig, load_client_config, parse_config_dict
from BvbrcApi.config.auth import (
    get_auth_token,
    get_config,
    load_config_file,
    reset_config,
    set_auth_token,
    set_config,
)
from BvbrcApi.config.runtime import RuntimeConfig

__all__ = [
    "ApiConfig",
    "RuntimeConfig",
    "ClientConfig",
    "load_client_config",
    "parse_config_dict",
    "set_auth_token",
    "get_auth_token",
    "get_config",
    "set_config",
    "reset_config",
    "load_config_file",
]
