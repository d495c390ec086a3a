"""Unit tests for the FlightLayout event handlers.

NiceGUI itself is not exercised.  Elements are replaced with stand-ins,
including ones that behave like elements whose client has disconnected.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from flightwatch.core import events
from flightwatch.core.models.config import FlightWatchConfig
from flightwatch.core.models.event import Event
from flightwatch.ui.layout import FlightLayout, PageView


class _BrokenTextElement:
    """Mimics a NiceGUI element whose client has already been deleted."""

    @property
    def text(self):
        return ""

    @text.setter
    def text(self, t):
        raise RuntimeError("The client this element belongs to has been deleted.")


def _layout(watcher=None) -> FlightLayout:
    return FlightLayout(
        watcher=watcher or MagicMock(),
        event_bus=MagicMock(),
        config=FlightWatchConfig(),
    )


def _view(value: str = "", text=None, dialog_label=None) -> PageView:
    return PageView(
        input=MagicMock(value=value),
        text=text if text is not None else MagicMock(),
        dialog=MagicMock(),
        dialog_label=dialog_label if dialog_label is not None else MagicMock(),
    )


async def test_display_update_sets_text() -> None:
    layout = _layout()
    view = _view()
    layout.add_view(view)

    await layout._on_display_updated(
        Event(event_type=events.DISPLAY_UPDATED, payload={"text": "Status: active"})
    )

    assert view.text.text == "Status: active"


async def test_display_update_before_page_built() -> None:
    layout = _layout()
    await layout._on_display_updated(Event(event_type=events.DISPLAY_UPDATED, payload={"text": "x"}))


async def test_display_update_reaches_every_open_page() -> None:
    layout = _layout()
    first, second = _view(), _view()
    layout.add_view(first)
    layout.add_view(second)

    await layout._on_display_updated(Event(event_type=events.DISPLAY_UPDATED, payload={"text": "x"}))

    assert first.text.text == "x"
    assert second.text.text == "x"


async def test_display_handler_drops_disconnected_view() -> None:
    layout = _layout()
    gone, alive = _view(text=_BrokenTextElement()), _view()
    layout.add_view(gone)
    layout.add_view(alive)

    await layout._on_display_updated(Event(event_type=events.DISPLAY_UPDATED, payload={"text": "x"}))

    assert layout.views == [alive]
    assert alive.text.text == "x"


async def test_status_change_opens_dialog() -> None:
    layout = _layout()
    view = _view()
    layout.add_view(view)

    await layout._on_status_changed(
        Event(
            event_type=events.STATUS_CHANGED,
            payload={"status": "landed", "message": "Flight status changed to: landed"},
        )
    )

    assert view.dialog_label.text == "Flight status changed to: landed"
    view.dialog.open.assert_called_once()


async def test_status_handler_ignores_runtime_error() -> None:
    layout = _layout()
    view = _view(dialog_label=_BrokenTextElement())
    layout.add_view(view)

    await layout._on_status_changed(
        Event(event_type=events.STATUS_CHANGED, payload={"message": "Flight status changed to: active"})
    )

    view.dialog.open.assert_not_called()
    assert layout.views == []


@pytest.mark.parametrize("value", ["BA117", ""])
async def test_enter_submits_input_value(value) -> None:
    watcher = MagicMock()
    watcher.submit = AsyncMock(return_value=None)
    layout = _layout(watcher)
    view = _view(value)
    layout.add_view(view)

    await layout.submit_from(view)

    watcher.submit.assert_awaited_once_with(value)


async def test_enter_submits_from_its_own_page() -> None:
    watcher = MagicMock()
    watcher.submit = AsyncMock(return_value=None)
    layout = _layout(watcher)
    first, second = _view("BA117"), _view("LH400")
    layout.add_view(first)
    layout.add_view(second)

    await layout.submit_from(first)

    watcher.submit.assert_awaited_once_with("BA117")


def test_remove_view_is_idempotent() -> None:
    layout = _layout()
    view = _view()
    layout.add_view(view)

    layout.remove_view(view)
    layout.remove_view(view)

    assert layout.views == []
