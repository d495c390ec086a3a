"""Main page — IATA input, Enter button, result text, status-change alert.

The page never talks to the provider.  It hands input to
:class:`FlightWatcher` and re-renders when the event bus reports a display
update or a status change.
"""

from __future__ import annotations

import logging as _logging
from dataclasses import dataclass
from typing import Any

from nicegui import Client, ui

from flightwatch.core import events
from flightwatch.core.event_bus import EventBus
from flightwatch.core.models.config import FlightWatchConfig
from flightwatch.core.models.event import Event
from flightwatch.core.watcher import FlightWatcher

_log = _logging.getLogger(__name__)

_TEXT_STYLE = (
    "font-family: 'Courier New', monospace; font-size: 15px; white-space: pre-wrap; "
    "background: #111111; color: #eeeeee; padding: 12px; min-height: 200px; "
    "width: 500px; border-radius: 4px;"
)


@dataclass(eq=False)
class PageView:
    """Elements of one connected client's page."""

    input: Any
    text: Any
    dialog: Any
    dialog_label: Any


class FlightLayout:
    """Builds the ``/`` page and keeps every open page in sync with bus events.

    Args:
        watcher: Session launcher and owner of the display text.
        event_bus: Bus carrying display updates and alerts.
        config: Application configuration (title only).
    """

    def __init__(
        self,
        watcher: FlightWatcher,
        event_bus: EventBus,
        config: FlightWatchConfig,
    ) -> None:
        self._watcher = watcher
        self._bus = event_bus
        self._config = config
        self._views: list[PageView] = []

    @property
    def views(self) -> list[PageView]:
        return list(self._views)

    def setup_page(self) -> None:
        """Register the ``@ui.page('/')`` route and the bus subscriptions."""
        self._bus.subscribe(events.DISPLAY_UPDATED, self._on_display_updated)
        self._bus.subscribe(events.STATUS_CHANGED, self._on_status_changed)

        @ui.page("/")
        def index(client: Client):
            view = self._build_page()
            client.on_disconnect(lambda: self.remove_view(view))

    def _build_page(self) -> PageView:
        ui.page_title(self._config.system.window_title)

        async def on_enter(*_args: Any) -> None:
            await self.submit_from(view)

        with ui.column().classes("items-start").style("padding: 24px; gap: 16px;"):
            with ui.row().classes("items-center").style("gap: 16px;"):
                iata_input = ui.input(label="Flight IATA:").style("width: 200px;")
                iata_input.on("keydown.enter", on_enter)
                ui.button("Enter", on_click=on_enter)

            text = ui.label(self._watcher.display.text).style(_TEXT_STYLE)

        with ui.dialog() as dialog, ui.card():
            dialog_label = ui.label("")
            ui.button("OK", on_click=dialog.close)

        view = PageView(input=iata_input, text=text, dialog=dialog, dialog_label=dialog_label)
        self.add_view(view)
        return view

    def add_view(self, view: PageView) -> None:
        self._views.append(view)

    def remove_view(self, view: PageView) -> None:
        if view in self._views:
            self._views.remove(view)

    async def submit_from(self, view: PageView) -> None:
        """Submit the value typed into *view*'s own input."""
        await self._watcher.submit(view.input.value or "")

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    # Elements may belong to a client that has disconnected; NiceGUI then
    # raises RuntimeError on update.  Such views are dropped and the bus
    # keeps the subscription for the other pages.

    async def _on_display_updated(self, event: Event) -> None:
        text = event.payload.get("text", "")
        for view in self.views:
            try:
                view.text.text = text
            except RuntimeError:
                _log.debug("Display update dropped, client gone")
                self.remove_view(view)

    async def _on_status_changed(self, event: Event) -> None:
        message = event.payload.get("message", "")
        _log.info("Alerting user: %s", message)
        for view in self.views:
            try:
                view.dialog_label.text = message
                view.dialog.open()
            except RuntimeError:
                _log.debug("Status alert dropped, client gone")
                self.remove_view(view)
