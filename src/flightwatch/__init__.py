"""FlightWatch — poll a flight's status and alert when it changes."""

__version__ = "0.1.0"
