"""Event type names shared by poll sessions and the UI."""

# --- Core → UI ------------------------------------------------------------

DISPLAY_UPDATED = "output.display.updated"
STATUS_CHANGED = "flight.status.changed"

# --- Poll session lifecycle -------------------------------------------------

POLL_STARTED = "flight.poll.started"
POLL_STOPPED = "flight.poll.stopped"
