"""RQL filter fragment builder.

Every function returns a plain string fragment such as ``eq(genome_id,208964.12)``.
The empty string is the empty fragment: combinators drop it, so callers can
pass optional predicates without branching. Nothing here raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import SimpleNamespace
from typing import Any
from urllib.parse import quote

# Same unreserved set as JavaScript's encodeURIComponent.
_SAFE_CHARS = "!~*'()"

# Bare +/- are RQL operators; strand values must be quoted to stay literal.
_STRAND_VALUES = frozenset({"+", "-"})


def encode_value(value: Any) -> str:
    """Percent-encode one predicate value."""
    if isinstance(value, str) and value in _STRAND_VALUES:
        return quote(f'"{value}"', safe=_SAFE_CHARS)
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif value is None:
        text = "null"
    else:
        text = str(value)
    return quote(text, safe=_SAFE_CHARS)


def eq(field: str, value: Any) -> str:
    return f"eq({field},{encode_value(value)})"


def gt(field: str, value: Any) -> str:
    return f"gt({field},{encode_value(value)})"


def lt(field: str, value: Any) -> str:
    return f"lt({field},{encode_value(value)})"


def in_(field: str, values: Iterable[Any] | None) -> str:
    """Build ``in(field,v1,v2,...)``; an empty value set yields the empty fragment."""
    if isinstance(values, str):
        values = (values,)
    elif not isinstance(values, Iterable):
        return ""
    encoded = [encode_value(value) for value in values]
    if not encoded:
        return ""
    return f"in({field},{','.join(encoded)})"


def and_(*fragments: str) -> str:
    """Join non-empty fragments with ``and(...)``."""
    return _combine("and", fragments)


def or_(*fragments: str) -> str:
    """Join non-empty fragments with ``or(...)``."""
    return _combine("or", fragments)


def keyword(term: Any) -> str:
    """Build a free-text ``keyword(...)`` clause."""
    if term is None or term == "":
        return ""
    return f"keyword({encode_value(term)})"


def select(fields: Iterable[str] | str | None) -> str:
    if not fields:
        return ""
    if isinstance(fields, str):
        fields = (fields,)
    elif not isinstance(fields, Iterable):
        return ""
    names = [str(name) for name in fields if name]
    return f"select({','.join(names)})" if names else ""


def sort(expr: str | None) -> str:
    return f"sort({expr})" if expr else ""


def integer_limit(value: Any) -> int | None:
    """Return ``value`` as an int when it is integral (``7`` or ``7.0``), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def limit(value: Any) -> str:
    count = integer_limit(value)
    return "" if count is None else f"limit({count})"


def http_download(enabled: bool = False) -> str:
    return "http_download=true" if enabled else ""


def obj_to_eq(filters: Mapping[str, Any] | None) -> list[str]:
    """Map each ``field -> value`` entry to an ``eq`` fragment, keeping order."""
    if not filters or not isinstance(filters, Mapping):
        return []
    return [eq(field, value) for field, value in filters.items()]


def build_and_from(filters: Mapping[str, Any] | None) -> str:
    return and_(*obj_to_eq(filters))


def _combine(operator: str, fragments: Iterable[str]) -> str:
    cleaned = [fragment for fragment in fragments if fragment]
    if not cleaned:
        return ""
    return f"{operator}({','.join(cleaned)})"


# Namespace mirroring RQL operator names, e.g. ``qb.and_(qb.eq(...), ...)``.
qb = SimpleNamespace(
    eq=eq,
    gt=gt,
    lt=lt,
    in_=in_,
    and_=and_,
    or_=or_,
    keyword=keyword,
    select=select,
    sort=sort,
    limit=limit,
    http_download=http_download,
    obj_to_eq=obj_to_eq,
    build_and_from=build_and_from,
)
