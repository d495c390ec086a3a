"""FlightWatch — application entry point (NiceGUI composition root).

Wires together: Config → Secrets → EventBus → FlightQuery → FlightWatcher → UI.
NiceGUI owns the event loop; ``app.on_startup`` / ``app.on_shutdown``
handle lifecycle.
"""

from __future__ import annotations

import logging as _logging

from nicegui import app, ui

from flightwatch.config.config_manager import load_config
from flightwatch.config.secrets_manager import SecretsManager
from flightwatch.core.event_bus import EventBus
from flightwatch.core.flight_query import FlightQuery
from flightwatch.core.watcher import FlightWatcher
from flightwatch.logging.logger import setup_logging
from flightwatch.ui.layout import FlightLayout

_log = _logging.getLogger(__name__)


def main() -> None:
    """Synchronous entry point — bootstraps and starts NiceGUI."""

    setup_logging()
    config = load_config()
    setup_logging(log_level=config.system.log_level, log_dir=config.system.log_dir)
    _log.info("Starting FlightWatch")

    secrets = SecretsManager()
    api_key = secrets.get(config.api.api_key_name)
    if not api_key:
        _log.warning(
            "No API key found in %s; the provider will reject requests", config.api.api_key_name
        )

    bus = EventBus(queue_size=config.system.event_bus_queue_size)
    query = FlightQuery(
        endpoint=config.api.endpoint,
        api_key=api_key,
        timeout=config.api.request_timeout_seconds,
    )
    watcher = FlightWatcher(query=query, event_bus=bus, polling=config.polling)

    layout = FlightLayout(watcher=watcher, event_bus=bus, config=config)
    layout.setup_page()

    async def on_startup() -> None:
        await bus.start()
        _log.info("FlightWatch running on http://localhost:%d", config.system.webui_port)

    async def on_shutdown() -> None:
        await watcher.shutdown()
        await bus.stop()
        _log.info("FlightWatch stopped")

    app.on_startup(on_startup)
    app.on_shutdown(on_shutdown)

    ui.run(
        port=config.system.webui_port,
        title=config.system.window_title,
        native=config.system.native,
        reload=False,
        show=not config.system.native,
    )


if __name__ == "__main__":
    main()
