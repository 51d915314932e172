"""HTTP layer: connection context and query runner."""

from __future__ import annotations

from BvbrcApi.client.context import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    ExecutionContext,
    create_context,
)
from BvbrcApi.client.runner import BvbrcApiClient, build_body, run

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_HEADERS",
    "ExecutionContext",
    "create_context",
    "BvbrcApiClient",
    "build_body",
    "run",
]
