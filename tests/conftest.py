"""Shared pytest fixtures for FlightWatch tests."""

from __future__ import annotations

import pytest

from flightwatch.config.secrets_manager import SecretsManager
from flightwatch.core import events
from flightwatch.core.event_bus import EventBus
from flightwatch.core.models.config import FlightWatchConfig
from flightwatch.core.models.event import Event


@pytest.fixture
async def event_bus():
    """Provide a started EventBus that is stopped after the test."""
    bus = EventBus(queue_size=100)
    await bus.start()
    yield bus
    await bus.stop()


@pytest.fixture
def recorded(event_bus: EventBus) -> list[Event]:
    """Every event published on ``event_bus`` for the core event types."""
    seen: list[Event] = []
    for event_type in (
        events.DISPLAY_UPDATED,
        events.STATUS_CHANGED,
        events.POLL_STARTED,
        events.POLL_STOPPED,
    ):
        event_bus.subscribe(event_type, seen.append)
    return seen


@pytest.fixture(scope="session")
def flightwatch_config() -> FlightWatchConfig:
    """Session-scoped default config (no file I/O)."""
    return FlightWatchConfig()


@pytest.fixture
def secrets() -> SecretsManager:
    """Fresh SecretsManager (no file loaded)."""
    return SecretsManager()
