"""Starts polling sessions from user submissions."""

from __future__ import annotations

import asyncio
import logging

from flightwatch.core import events
from flightwatch.core.display import DisplayText
from flightwatch.core.event_bus import EventBus
from flightwatch.core.flight_query import FlightQuery
from flightwatch.core.models.config import PollingConfig
from flightwatch.core.poll_loop import PollSession

_log = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please enter a valid IATA code"


class FlightWatcher:
    """Owns the display buffer and launches one task per submission.

    Sessions are independent: submitting again while an earlier session is
    still polling starts a second session, and both write to the same
    :class:`DisplayText` (last writer wins).

    Args:
        query: Provider client shared by all sessions.
        event_bus: Bus the UI listens on.
        polling: Interval and first-status behaviour for new sessions.
        display: Text sink; a fresh one is created when omitted.
    """

    def __init__(
        self,
        query: FlightQuery,
        event_bus: EventBus,
        polling: PollingConfig | None = None,
        display: DisplayText | None = None,
    ) -> None:
        self._query = query
        self._bus = event_bus
        self._polling = polling or PollingConfig()
        self._display = display or DisplayText()
        self._tasks: set[asyncio.Task[str]] = set()

    @property
    def display(self) -> DisplayText:
        return self._display

    @property
    def active_tasks(self) -> set[asyncio.Task[str]]:
        return set(self._tasks)

    async def submit(self, iata_code: str) -> PollSession | None:
        """Start watching *iata_code*.

        Blank input is rejected on the spot with no network request, and
        ``None`` is returned.
        """
        code = (iata_code or "").strip()
        if not code:
            self._display.set_text(INVALID_INPUT_MESSAGE)
            await self._bus.publish(events.DISPLAY_UPDATED, {"iata": "", "text": INVALID_INPUT_MESSAGE})
            return None

        session = PollSession(
            iata_code=code,
            query=self._query,
            display=self._display,
            event_bus=self._bus,
            interval_seconds=self._polling.interval_seconds,
            first_status_is_change=self._polling.first_status_is_change,
        )
        task = asyncio.create_task(session.run(), name=f"poll-{code}")
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        _log.info("Started session for %s (%d active)", code, len(self._tasks))
        return session

    async def shutdown(self) -> None:
        """Cancel every running session.  Only used at process exit."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        _log.info("Watcher stopped (%d sessions cancelled)", len(tasks))

    def _on_task_done(self, task: asyncio.Task[str]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _log.error("Session %s crashed: %r", task.get_name(), exc)
