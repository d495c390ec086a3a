"""Pydantic models for configuration, events, and flight data."""
from flightwatch.core.models.config import ApiConfig, FlightWatchConfig, PollingConfig, SystemConfig
from flightwatch.core.models.event import Event
from flightwatch.core.models.flight import FlightRecord, FlightResponsePayload, OutcomeKind, PollState

__all__ = [
    "ApiConfig",
    "FlightWatchConfig",
    "PollingConfig",
    "SystemConfig",
    "Event",
    "FlightRecord",
    "FlightResponsePayload",
    "OutcomeKind",
    "PollState",
]
