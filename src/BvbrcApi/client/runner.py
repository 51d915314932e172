"""BV-BRC query runner.

Validates options, assembles the ``&``-joined RQL body and POSTs it to one
core. No retries: every failure is surfaced to the caller.
"""

from __future__ import annotations

from typing import Any, Mapping

import requests

from BvbrcApi.client.context import ExecutionContext, create_context
from BvbrcApi.core import builder
from BvbrcApi.core.errors import HttpError
from BvbrcApi.core.query import QueryOptions
from BvbrcApi.utils.log import log

OptionsLike = QueryOptions | Mapping[str, Any] | None


def build_body(filter: str = "", options: OptionsLike = None) -> str:  # noqa: A002 - RQL term
    """Assemble the request body for one query.

    Parts are emitted in a fixed order: filter, select, sort, limit,
    http_download. Empty parts are skipped.

    Args:
        filter: Pre-built filter fragment (may be empty).
        options: Query options; mapping or QueryOptions.

    Returns:
        RQL body string.

    Raises:
        InvalidOptions: If options are inconsistent.
    """
    resolved = QueryOptions.from_value(options)
    parts = (
        filter,
        builder.select(resolved.select),
        builder.sort(resolved.sort),
        builder.limit(resolved.effective_limit),
        builder.http_download(resolved.http_download),
    )
    return "&".join(part for part in parts if part)


class BvbrcApiClient:
    """Low-level HTTP client for BV-BRC cores.

    Holds one reusable HTTP session bound to an ExecutionContext. The context
    is immutable, so one client may serve concurrent callers.
    """

    def __init__(self, context: ExecutionContext | None = None) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            context: Connection configuration; defaults to create_context().
        """
        self.context = context or create_context()
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session.
        """
        self._session.close()

    def __enter__(self) -> BvbrcApiClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager and close session."""
        self.close()

    def run(self, core: str, filter: str = "", options: OptionsLike = None) -> Any:  # noqa: A002 - RQL term
        """Run one query against a core and return the decoded JSON.

        Args:
            core: Core name, e.g. ``genome``. Not validated client-side.
            filter: Pre-built filter fragment.
            options: Query options.

        Returns:
            Parsed JSON payload, as returned by the service.

        Raises:
            InvalidOptions: Before any request when options are inconsistent.
            HttpError: When the service answers with a non-success status.
            requests.RequestException: On transport failures.
        """
        body = build_body(filter, options)
        url = self.context.url_for(core)
        log.debug("BV-BRC request: url=%s body=%s", url, body)

        response = self._session.post(
            url,
            data=body.encode("utf-8"),
            headers=dict(self.context.headers),
            timeout=self.context.timeout,
        )
        if not 200 <= response.status_code < 300:
            log.debug("BV-BRC response failed: status=%s reason=%s", response.status_code, response.reason)
            raise HttpError(response.status_code, response.reason or "", url=url)

        log.debug("BV-BRC response ok: status=%s bytes=%s", response.status_code, len(response.content))
        return response.json()


def run(
    core: str,
    filter: str = "",  # noqa: A002 - RQL term
    options: OptionsLike = None,
    context: ExecutionContext | None = None,
) -> Any:
    """Run one query with a short-lived client.

    Args:
        core: Core name.
        filter: Pre-built filter fragment.
        options: Query options.
        context: Connection configuration; defaults to create_context().

    Returns:
        Parsed JSON payload.
    """
    with BvbrcApiClient(context) as client:
        return client.run(core, filter, options)
