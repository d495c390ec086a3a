"""Async pub/sub used to hand results from poll sessions to the UI.

Poll sessions never touch UI elements.  They publish display updates and
status-change alerts here, and the NiceGUI page subscribes to them.

* Handlers may be plain functions or coroutines.
* A handler that raises is logged and unsubscribed.
* The queue is bounded; on overflow the oldest event is discarded.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable

from flightwatch.core.models.event import Event

_log = logging.getLogger(__name__)


@dataclass
class _Subscription:
    sub_id: str
    event_type: str
    handler: Callable[..., Any]


class EventBus:
    """Event bus backed by an :class:`asyncio.Queue`.

    Args:
        queue_size: Maximum number of undelivered events.
    """

    def __init__(self, queue_size: int = 1000) -> None:
        self._queue_size = queue_size
        self._queue: asyncio.Queue[Event] | None = None
        self._subscriptions: dict[str, _Subscription] = {}
        self._consumer_task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._consumer_task is not None and not self._consumer_task.done()

    async def start(self) -> None:
        """Start dispatching.  Must be awaited on the running event loop."""
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._consumer_task = asyncio.create_task(self._consume(), name="event-bus-consumer")
        _log.info("Event bus started (queue_size=%d)", self._queue_size)

    async def stop(self) -> None:
        if self._consumer_task is not None:
            self._consumer_task.cancel()
            try:
                await self._consumer_task
            except asyncio.CancelledError:
                pass
            self._consumer_task = None
        self._subscriptions.clear()
        _log.info("Event bus stopped")

    async def publish(self, event_type: str, payload: dict[str, Any] | None = None) -> None:
        """Queue an event.  Call from coroutines running on the bus loop."""
        assert self._queue is not None, "EventBus.start() has not been called"
        event = Event(event_type=event_type, payload=payload or {})
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            try:
                self._queue.get_nowait()
            except asyncio.QueueEmpty:
                pass
            _log.warning("Event bus queue overflow, dropped oldest event")
            self._queue.put_nowait(event)

    def subscribe(self, event_type: str, handler: Callable[..., Any]) -> str:
        """Register *handler* for *event_type* and return its subscription id."""
        sub_id = uuid.uuid4().hex
        self._subscriptions[sub_id] = _Subscription(sub_id, event_type, handler)
        return sub_id

    def unsubscribe(self, sub_id: str) -> None:
        self._subscriptions.pop(sub_id, None)

    async def _consume(self) -> None:
        assert self._queue is not None
        while True:
            event = await self._queue.get()
            await self._dispatch(event)

    async def _dispatch(self, event: Event) -> None:
        matching = [s for s in self._subscriptions.values() if s.event_type == event.event_type]
        for sub in matching:
            try:
                result = sub.handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                _log.exception(
                    "Handler %s for '%s' raised, unsubscribing",
                    sub.handler,
                    event.event_type,
                )
                self.unsubscribe(sub.sub_id)
