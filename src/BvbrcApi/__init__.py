"""BvbrcApi: query the BV-BRC data API with RQL filters.

Typical use::

    from BvbrcApi import BvbrcClient, qb

    with BvbrcClient() as client:
        rows = client.genome_feature.run(
            qb.and_(qb.gt("start", 100), qb.lt("end", 5000)),
            {"select": ["feature_id", "gene"], "sort": "feature_id", "limit": 50},
        )
"""

from __future__ import annotations

from BvbrcApi.client import BvbrcApiClient, ExecutionContext, build_body, create_context, run
from BvbrcApi.config import (
    ClientConfig,
    get_auth_token,
    get_config,
    load_client_config,
    load_config_file,
    set_auth_token,
    set_config,
)
from BvbrcApi.core.builder import qb
from BvbrcApi.core.errors import BvbrcApiError, HttpError, InvalidOptions
from BvbrcApi.core.query import DEFAULT_LIMIT, QueryOptions
from BvbrcApi.services import (
    BvbrcClient,
    create_client,
    create_client_from_config,
    get_client,
    query,
    reset_client,
)

__all__ = [
    "BvbrcApiClient",
    "BvbrcClient",
    "ExecutionContext",
    "ClientConfig",
    "QueryOptions",
    "DEFAULT_LIMIT",
    "BvbrcApiError",
    "HttpError",
    "InvalidOptions",
    "qb",
    "build_body",
    "create_context",
    "create_client",
    "create_client_from_config",
    "get_client",
    "reset_client",
    "query",
    "run",
    "load_client_config",
    "set_auth_token",
    "get_auth_token",
    "get_config",
    "set_config",
    "load_config_file",
]
