"""Client facade and module-level convenience helpers.

The default client is created lazily from the process-wide auth settings and
rebuilt whenever the token changes.
"""

from __future__ import annotations

from typing import Any

from BvbrcApi.client.context import create_context
from BvbrcApi.client.runner import OptionsLike
from BvbrcApi.config.app import ClientConfig
from BvbrcApi.config.auth import get_auth_token
from BvbrcApi.services.query import BvbrcClient, QueryCall
from BvbrcApi.utils.log import configure_logging

_default_client: BvbrcClient | None = None
_default_token: str | None = None


def create_client(**context_overrides: Any) -> BvbrcClient:
    """Create a client; overrides are passed to ``create_context``."""
    return BvbrcClient(create_context(**context_overrides))


def create_client_from_config(config: ClientConfig, *, setup_logging: bool = True) -> BvbrcClient:
    """Create a client from a loaded ClientConfig.

    Args:
        config: Validated client configuration.
        setup_logging: Whether to apply the config's ``log`` section.

    Returns:
        A client bound to the configured endpoint. The process-wide token,
        when set, takes precedence over the one resolved from the environment.
    """
    if setup_logging:
        configure_logging(
            level=config.runtime.level,
            log_to_file=config.runtime.to_file,
            log_dir=config.runtime.dir,
        )
    return BvbrcClient(config.to_context(auth_token=get_auth_token()))


def get_client() -> BvbrcClient:
    """Return the shared default client, honoring the current auth token.

    A token change swaps in a new client. The previous client is left open so
    requests already running on it in other threads can finish.
    """
    global _default_client, _default_token
    token = get_auth_token()
    if _default_client is None or token != _default_token:
        _default_client = create_client(auth_token=token)
        _default_token = token
    return _default_client


def reset_client() -> None:
    """Close and forget the shared default client."""
    global _default_client, _default_token
    if _default_client is not None:
        _default_client.close()
    _default_client = None
    _default_token = None


def query(core: str, filter: str = "", options: OptionsLike = None) -> Any:  # noqa: A002 - RQL term
    """Run a pre-built filter with the default client."""
    return get_client().query(core, filter, options)


__all__ = [
    "BvbrcClient",
    "QueryCall",
    "create_client",
    "create_client_from_config",
    "get_client",
    "reset_client",
    "query",
]
