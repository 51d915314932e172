from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

from BvbrcApi.core.builder import integer_limit
from BvbrcApi.core.errors import InvalidOptions
from BvbrcApi.utils.log import log

DEFAULT_LIMIT = 1000


@dataclass(frozen=True, slots=True)
class QueryOptions:
    """Per-call modifiers applied on top of a filter.

    Every field is optional:

    - `select`: projected fields, in output order. Empty means full records.
    - `sort`: one RQL sort expression, e.g. ``-genome_id``.
    - `limit`: row cap. Anything that is not integral (7 or 7.0) falls back to
      `DEFAULT_LIMIT`.
    - `http_download`: bulk delivery mode; requires `sort`.
    """

    select: Sequence[str] = ()
    sort: str | None = None
    limit: int | None = None
    http_download: bool = False

    @classmethod
    def from_value(cls, value: QueryOptions | Mapping[str, Any] | None) -> QueryOptions:
        """Coerce ``None``, a mapping, or an instance into validated options.

        Args:
            value: Options as given by the caller.

        Returns:
            Validated QueryOptions.

        Raises:
            InvalidOptions: If the options violate the http_download/sort
                constraint. Unknown mapping keys are ignored.
        """
        if value is None:
            options = cls()
        elif isinstance(value, QueryOptions):
            options = value
        elif isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = sorted(str(key) for key in value if key not in known)
            if unknown:
                log.debug("Ignoring unknown query options: %s", ", ".join(unknown))
            options = cls(**{key: item for key, item in value.items() if key in known})
        else:
            log.debug("Ignoring query options of type %s", type(value).__name__)
            options = cls()
        options.validate()
        return options

    @property
    def effective_limit(self) -> int:
        """Return the limit sent to the service."""
        count = integer_limit(self.limit)
        return DEFAULT_LIMIT if count is None else count

    def validate(self) -> None:
        """Check the cross-field constraint.

        Raises:
            InvalidOptions: If ``http_download`` is set without ``sort``.
        """
        if self.http_download and not self.sort:
            raise InvalidOptions("sort parameter is required when http_download is true")
