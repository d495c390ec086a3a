"""Provider response models and the flattened :class:`FlightRecord`.

The ``*Payload`` models mirror the Aviationstack ``/v1/flights`` JSON shape
and ignore fields we do not use.  :class:`FlightRecord` is what the rest of
the application works with.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FlightInfoPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: str
    iata: str
    icao: str | None = None


class AirportPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    airport: str | None = None


class FlightEntryPayload(BaseModel):
    """One element of the response's ``data`` list."""

    model_config = ConfigDict(extra="ignore")

    flight: FlightInfoPayload
    departure: AirportPayload = Field(default_factory=AirportPayload)
    arrival: AirportPayload = Field(default_factory=AirportPayload)
    flight_status: str | None = None
    flight_date: str | None = None


class FlightResponsePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[FlightEntryPayload]


class FlightRecord(BaseModel):
    """Immutable snapshot of one flight, produced once per query."""

    model_config = ConfigDict(frozen=True)

    number: str
    iata: str
    icao: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    flight_status: str | None = None
    flight_date: str | None = None

    @classmethod
    def from_entry(cls, entry: FlightEntryPayload) -> FlightRecord:
        return cls(
            number=entry.flight.number,
            iata=entry.flight.iata,
            icao=entry.flight.icao,
            departure_airport=entry.departure.airport,
            arrival_airport=entry.arrival.airport,
            flight_status=entry.flight_status,
            flight_date=entry.flight_date,
        )


class OutcomeKind(str, Enum):
    """Classification of a single flight query."""

    FOUND = "found"
    NO_DATA = "no_data"
    TRANSPORT_ERROR = "transport_error"
    PARSE_ERROR = "parse_error"


class PollState(str, Enum):
    """Lifecycle state of a polling session."""

    POLLING = "polling"
    STOPPED = "stopped"
