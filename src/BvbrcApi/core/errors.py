"""Error taxonomy raised by the query pipeline.

Transport failures (DNS, refused connections, timeouts) are not wrapped: they
surface as the ``requests`` exception that caused them.
"""

from __future__ import annotations


class BvbrcApiError(Exception):
    """Base class for errors raised by BvbrcApi."""


class InvalidOptions(BvbrcApiError, ValueError):
    """Raised before any network I/O when query options are inconsistent."""


class HttpError(BvbrcApiError):
    """Raised when the remote service answers with a non-success status.

    Attributes:
        status_code: HTTP status code of the response.
        reason: HTTP status text of the response.
        url: Requested URL.
    """

    def __init__(self, status_code: int, reason: str = "", *, url: str = "") -> None:
        self.status_code = status_code
        self.reason = reason or ""
        self.url = url
        super().__init__(f"{status_code} {self.reason}".strip())
