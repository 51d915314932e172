"""Client facade that binds every registered core to one runner."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

from BvbrcApi.client.context import ExecutionContext, create_context
from BvbrcApi.client.runner import BvbrcApiClient, OptionsLike
from BvbrcApi.resources.registry import get_core, supported_core_names
from BvbrcApi.resources.resource import Resource
from BvbrcApi.utils.log import log

QueryCall = tuple[str, str] | tuple[str, str, OptionsLike]


class BvbrcClient:
    """Entry point exposing one Resource per BV-BRC core.

    Cores are available as attributes (``client.genome``) or through
    ``client.resource("genome")``. Ad-hoc queries go through ``query``.
    """

    def __init__(self, context: ExecutionContext | None = None, **context_overrides: Any) -> None:
        """Initialize the client.

        Args:
            context: Connection configuration. When omitted, one is built from
                ``context_overrides`` (base_url, headers, auth_token, timeout).
        """
        if context is not None and context_overrides:
            raise ValueError("Pass either context or context overrides, not both")
        self.context = context or create_context(**context_overrides)
        self.api = BvbrcApiClient(self.context)
        self._resources: dict[str, Resource] = {}

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.api.close()

    def __enter__(self) -> BvbrcClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def resource(self, core: str) -> Resource:
        """Return the Resource bound to ``core``.

        Raises:
            ValueError: If ``core`` is not a registered core.
        """
        resource = self._resources.get(core)
        if resource is None:
            resource = Resource(get_core(core), self.api)
            self._resources[core] = resource
        return resource

    def query(self, core: str, filter: str = "", options: OptionsLike = None) -> Any:  # noqa: A002 - RQL term
        """Run a pre-built filter against any core name."""
        return self.api.run(core, filter, options)

    def query_many(self, calls: Sequence[QueryCall], *, max_workers: int = 4) -> list[Any]:
        """Run several queries concurrently.

        Args:
            calls: ``(core, filter)`` or ``(core, filter, options)`` tuples.
            max_workers: Thread pool size.

        Returns:
            Results in the order of ``calls``.

        Raises:
            Exception: The first failure in input order; no partial results.
        """
        if not calls:
            return []
        log.debug("Running %d BV-BRC queries with max_workers=%d", len(calls), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self.query, *call) for call in calls]
            return [future.result() for future in futures]

    def __getattr__(self, attr: str) -> Resource:
        if attr.startswith("_") or attr not in supported_core_names():
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {attr!r}")
        return self.resource(attr)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(supported_core_names()))
