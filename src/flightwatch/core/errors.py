"""Errors raised while querying the flight-data provider.

All of them are caught by :meth:`FlightQuery.run` and turned into display
text; none of them end a polling session.
"""

from __future__ import annotations


class FlightQueryError(Exception):
    """Base class for query failures."""


class TransportError(FlightQueryError):
    """The request failed or the provider answered with an error.

    ``status_code`` is set whenever the provider answered (non-success
    status, or an ``error`` object in a 200 reply), together with the raw
    response ``body`` (possibly empty).  Connection-level failures leave
    both as ``None``.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @property
    def has_response(self) -> bool:
        return self.status_code is not None


class ParseError(FlightQueryError):
    """The response body did not match the expected JSON shape."""


class EmptyResult(FlightQueryError):
    """Well-formed response with no flight records."""
