"""Connection configuration shared by every query."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_BASE_URL = "https://www.bv-brc.org/api"
RQL_CONTENT_TYPE = "application/rqlquery+x-www-form-urlencoded"

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "application/json",
        "Content-Type": RQL_CONTENT_TYPE,
    }
)


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Immutable endpoint + headers used to send queries.

    Attributes:
        base_url: Service root, e.g. ``https://www.bv-brc.org/api``.
        headers: Read-only request headers.
        timeout: Optional transport timeout in seconds passed to requests.
    """

    base_url: str = DEFAULT_BASE_URL
    headers: Mapping[str, str] = field(default_factory=lambda: DEFAULT_HEADERS)
    timeout: float | None = None

    def url_for(self, core: str) -> str:
        """Return the POST endpoint of one core."""
        return f"{self.base_url.rstrip('/')}/{core}/"


def create_context(
    *,
    base_url: str | None = None,
    headers: Mapping[str, str] | None = None,
    auth_token: str | None = None,
    timeout: float | None = None,
) -> ExecutionContext:
    """Build an ExecutionContext from optional overrides.

    Caller headers are merged over the defaults field by field. A token is
    sent as the ``Authorization`` header unless ``headers`` already set one.

    Args:
        base_url: Service root; defaults to DEFAULT_BASE_URL.
        headers: Extra headers; values override defaults.
        auth_token: Optional static auth token.
        timeout: Optional transport timeout in seconds.

    Returns:
        A new ExecutionContext.
    """
    merged: dict[str, str] = dict(DEFAULT_HEADERS)
    if auth_token:
        merged["Authorization"] = auth_token
    if headers:
        merged.update({str(key): str(value) for key, value in headers.items()})
    return ExecutionContext(
        base_url=base_url or DEFAULT_BASE_URL,
        headers=MappingProxyType(merged),
        timeout=timeout,
    )
