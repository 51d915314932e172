"""Generic per-core query surface.

A Resource turns named lookups into builder calls followed by one ``run``:

- ``get_by_<name>(value, options)`` -> ``eq(<field>,value)``
- ``get_by_<name>_range(low, high, options)`` -> ``and(gt(lo,low),lt(hi,high))``

Field names come from the core's alias tables (see ``registry``) and fall
back to ``<name>`` itself.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Mapping

from BvbrcApi.core import builder
from BvbrcApi.resources.registry import CoreSpec

if TYPE_CHECKING:
    from BvbrcApi.client.runner import BvbrcApiClient, OptionsLike

_GET_BY = "get_by_"
_RANGE = "_range"


class Resource:
    """Query surface bound to one core and one client."""

    def __init__(self, spec: CoreSpec, client: BvbrcApiClient) -> None:
        self.spec = spec
        self._client = client

    @property
    def core(self) -> str:
        return self.spec.name

    def run(self, filter: str = "", options: OptionsLike = None) -> Any:  # noqa: A002 - RQL term
        """Run a pre-built filter against this core."""
        return self._client.run(self.core, filter, options)

    def where(self, filters: Mapping[str, Any] | None = None, options: OptionsLike = None) -> Any:
        """Match every ``field -> value`` pair (AND of ``eq``).

        Args:
            filters: Field/value pairs, order preserved in the query.
            options: Query options.

        Returns:
            Parsed JSON payload.
        """
        return self.run(builder.build_and_from(filters), options)

    query_by = where

    def get_by_id(self, value: Any, options: OptionsLike = None) -> Any:
        return self.run(builder.eq(self.spec.id_field, value), options)

    def get_by(self, name: str, value: Any, options: OptionsLike = None) -> Any:
        """Match one field, resolving ``name`` through the alias table."""
        return self.run(builder.eq(self.spec.eq_field(name), value), options)

    def get_by_range(self, name: str, low: Any, high: Any, options: OptionsLike = None) -> Any:
        """Match values strictly between ``low`` and ``high``.

        Either bound may be ``None`` to leave that side open.
        """
        lower_field, upper_field = self.spec.range_fields(name)
        lower = builder.gt(lower_field, low) if low is not None else ""
        upper = builder.lt(upper_field, high) if high is not None else ""
        return self.run(builder.and_(lower, upper), options)

    def search_by_keyword(self, term: Any, options: OptionsLike = None) -> Any:
        return self.run(builder.keyword(term), options)

    def get_all(self, options: OptionsLike = None) -> Any:
        return self.run("", options)

    def __getattr__(self, attr: str) -> Callable[..., Any]:
        if not attr.startswith(_GET_BY) or attr == _GET_BY:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {attr!r}")
        name = attr[len(_GET_BY):]
        if name.endswith(_RANGE) and name not in self.spec.eq_aliases:
            range_name = name[: -len(_RANGE)]

            def _range(low: Any, high: Any, options: OptionsLike = None) -> Any:
                return self.get_by_range(range_name, low, high, options)

            _range.__name__ = attr
            return _range

        def _eq(value: Any, options: OptionsLike = None) -> Any:
            return self.get_by(name, value, options)

        _eq.__name__ = attr
        return _eq

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(f"{_GET_BY}{alias}" for alias in self.spec.eq_aliases)
        names.update(f"{_GET_BY}{alias}{_RANGE}" for alias in self.spec.range_aliases)
        return sorted(names)

    def __repr__(self) -> str:
        return f"Resource(core={self.core!r})"
