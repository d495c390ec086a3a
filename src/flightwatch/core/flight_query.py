"""Flight query — one GET against the provider, classified and rendered.

:meth:`FlightQuery.fetch_record` raises on every kind of failure;
:meth:`FlightQuery.run` is the boundary that turns those failures into a
:class:`QueryOutcome` so callers always get something to display.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from flightwatch.core.errors import EmptyResult, ParseError, TransportError
from flightwatch.core.models.flight import FlightRecord, FlightResponsePayload, OutcomeKind
from flightwatch.net.http_helpers import http_get

_log = logging.getLogger(__name__)

UNKNOWN = "Unknown"
FETCH_FAILED = "Failed to fetch flight data"


@dataclass(frozen=True)
class QueryOutcome:
    """Result of one query: a record, or the reason there is none."""

    kind: OutcomeKind
    iata_code: str
    record: FlightRecord | None = None
    message: str | None = None

    @property
    def status(self) -> str | None:
        """Observed flight status; ``None`` unless a record was found."""
        if self.record is None:
            return None
        return self.record.flight_status

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.FOUND


def render_record(record: FlightRecord, index: int = 1) -> str:
    """Format *record* as ``Label: value`` lines."""
    lines = [
        f"Flight {index}:",
        f"Flight Number: {record.number}",
        f"Flight IATA: {record.iata}",
        f"Flight ICAO: {record.icao or UNKNOWN}",
        f"Departure Airport: {record.departure_airport or UNKNOWN}",
        f"Arrival Airport: {record.arrival_airport or UNKNOWN}",
    ]
    if record.flight_date:
        lines.append(f"Date: {record.flight_date}")
    lines.append(f"Status: {record.flight_status or UNKNOWN}")
    return "\n".join(lines) + "\n\n"


def render_outcome(outcome: QueryOutcome) -> str:
    """Return the display text for any outcome kind."""
    if outcome.kind is OutcomeKind.FOUND:
        assert outcome.record is not None
        return render_record(outcome.record)
    if outcome.kind is OutcomeKind.NO_DATA:
        return f"No flight data found for {outcome.iata_code}"
    return outcome.message or FETCH_FAILED


class FlightQuery:
    """Queries the Aviationstack ``/v1/flights`` endpoint by flight IATA code.

    Args:
        endpoint: Full URL of the flights endpoint.
        api_key: Provider access key, sent as ``access_key``.
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, endpoint: str, api_key: str, timeout: float = 10.0) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout = timeout

    def build_params(self, iata_code: str) -> dict[str, str]:
        return {"access_key": self._api_key, "flight_iata": iata_code}

    def fetch_record(self, iata_code: str) -> FlightRecord:
        """Perform one request and return the first flight in the response.

        Raises:
            TransportError: Network failure, non-success status, or an
                ``error`` object in the provider's reply.
            ParseError: Body is not JSON or does not have the expected shape.
            EmptyResult: The ``data`` list is empty.
        """
        resp = http_get(self._endpoint, params=self.build_params(iata_code), timeout=self._timeout)
        if not resp.ok:
            body = resp.text.strip()
            message = f"{FETCH_FAILED}: {body}" if body else FETCH_FAILED
            raise TransportError(message, status_code=resp.status_code, body=body)

        try:
            raw = resp.json()
        except ValueError as exc:
            raise ParseError(f"Failed to parse flight data: {exc}") from exc

        _raise_for_provider_error(raw, resp.status_code)

        try:
            payload = FlightResponsePayload.model_validate(raw)
        except ValidationError as exc:
            raise ParseError(f"Failed to parse flight data: {_summarize_validation(exc)}") from exc

        if not payload.data:
            raise EmptyResult(iata_code)
        return FlightRecord.from_entry(payload.data[0])

    def run(self, iata_code: str) -> QueryOutcome:
        """Query *iata_code* and classify the result.  Never raises for
        transport, parse, or empty-result failures."""
        try:
            record = self.fetch_record(iata_code)
        except EmptyResult:
            _log.info("No flights returned for %s", iata_code)
            return QueryOutcome(OutcomeKind.NO_DATA, iata_code)
        except ParseError as exc:
            _log.warning("Unparseable response for %s: %s", iata_code, exc)
            return QueryOutcome(OutcomeKind.PARSE_ERROR, iata_code, message=str(exc))
        except TransportError as exc:
            _log.warning("Query for %s failed: %s", iata_code, exc)
            text = str(exc) if exc.has_response else f"Error: {exc}"
            return QueryOutcome(OutcomeKind.TRANSPORT_ERROR, iata_code, message=text)

        _log.debug("Flight %s status=%s", iata_code, record.flight_status)
        return QueryOutcome(OutcomeKind.FOUND, iata_code, record=record)


def _raise_for_provider_error(raw: Any, status_code: int) -> None:
    """Aviationstack reports some failures as ``{"error": {...}}`` bodies."""
    if not isinstance(raw, dict) or "error" not in raw or "data" in raw:
        return
    err = raw["error"]
    if isinstance(err, dict):
        detail = err.get("message") or err.get("info") or err.get("code") or json.dumps(err)
    else:
        detail = str(err)
    raise TransportError(f"{FETCH_FAILED}: {detail}", status_code=status_code, body=json.dumps(raw))


def _summarize_validation(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(p) for p in first["loc"]) or "<root>"
    return f"{loc}: {first['msg']}"
