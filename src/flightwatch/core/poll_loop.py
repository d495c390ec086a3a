"""Poll loop — re-query one flight until its status changes.

A :class:`PollSession` starts in ``POLLING``, queries immediately, then
sleeps ``interval_seconds`` between queries.  The first status that differs
from the previously observed one raises a single ``flight.status.changed``
event and moves the session to ``STOPPED``.  Query failures are displayed
like any other result and never stop the loop.

Queries within a session are strictly sequential.  The blocking HTTP call
runs in a worker thread so the UI's event loop stays responsive.
"""

from __future__ import annotations

import asyncio
import logging
import threading

from flightwatch.core import events
from flightwatch.core.display import DisplayText
from flightwatch.core.event_bus import EventBus
from flightwatch.core.flight_query import FlightQuery, QueryOutcome, render_outcome
from flightwatch.core.models.flight import PollState
from flightwatch.logging import ContextualLogger

STATUS_CHANGED_TEMPLATE = "Flight status changed to: {status}"


class PollSession:
    """One polling session for a single IATA code.

    Args:
        iata_code: Flight to watch (already validated as non-empty).
        query: Provider client.
        display: Text sink shared with the UI.
        event_bus: Where display refreshes and alerts are published.
        interval_seconds: Sleep between consecutive queries.
        first_status_is_change: When ``True`` the first concrete status seen
            counts as a change and ends the session.  When ``False`` it only
            sets the baseline and the session waits for a later change.
    """

    def __init__(
        self,
        iata_code: str,
        query: FlightQuery,
        display: DisplayText,
        event_bus: EventBus,
        interval_seconds: float = 300.0,
        first_status_is_change: bool = True,
    ) -> None:
        self._iata = iata_code
        self._query = query
        self._display = display
        self._bus = event_bus
        self._interval = interval_seconds
        self._first_status_is_change = first_status_is_change

        self._lock = threading.Lock()
        self._previous_status: str | None = None
        self._state = PollState.POLLING
        self._poll_count = 0
        self._last_outcome: QueryOutcome | None = None

        self._log = ContextualLogger(logging.getLogger(__name__), iata=iata_code)

    @property
    def iata_code(self) -> str:
        return self._iata

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def previous_status(self) -> str | None:
        with self._lock:
            return self._previous_status

    @property
    def poll_count(self) -> int:
        return self._poll_count

    @property
    def last_outcome(self) -> QueryOutcome | None:
        return self._last_outcome

    async def run(self) -> str:
        """Poll until a status change is observed.  Returns the new status."""
        self._log.info("Polling started (interval=%.0fs)", self._interval)
        await self._bus.publish(events.POLL_STARTED, {"iata": self._iata})
        try:
            while True:
                if await self.poll_once():
                    break
                await asyncio.sleep(self._interval)
        except asyncio.CancelledError:
            self._state = PollState.STOPPED
            self._log.info("Polling cancelled after %d queries", self._poll_count)
            raise

        status = self.previous_status
        assert status is not None
        self._state = PollState.STOPPED
        message = STATUS_CHANGED_TEMPLATE.format(status=status)
        self._log.info("%s; polling stopped after %d queries", message, self._poll_count)
        await self._bus.publish(
            events.STATUS_CHANGED,
            {"iata": self._iata, "status": status, "message": message},
        )
        await self._bus.publish(events.POLL_STOPPED, {"iata": self._iata, "status": status})
        return status

    async def poll_once(self) -> bool:
        """Run one query, publish its text, and return ``True`` on a change."""
        outcome = await asyncio.to_thread(self._query.run, self._iata)
        self._poll_count += 1
        self._last_outcome = outcome

        text = render_outcome(outcome)
        self._display.set_text(text)
        await self._bus.publish(
            events.DISPLAY_UPDATED,
            {"iata": self._iata, "text": text, "kind": outcome.kind.value},
        )
        return self._observe(outcome.status)

    def _observe(self, status: str | None) -> bool:
        # Outcomes without a status (errors, empty data) are not observations.
        if status is None:
            return False
        with self._lock:
            previous = self._previous_status
            if status == previous:
                return False
            self._previous_status = status

        if previous is None and not self._first_status_is_change:
            self._log.info("Baseline status: %s", status)
            return False
        self._log.debug("Status %s -> %s", previous, status)
        return True
