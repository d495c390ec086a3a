"""Thin :mod:`requests` wrapper used by the flight query.

One attempt per call: polling already repeats requests on its own schedule,
so there is no retry or backoff here.
"""

from __future__ import annotations

from typing import Any

import requests

from flightwatch import __version__
from flightwatch.core.errors import TransportError
from flightwatch.net.error_utils import summarize_error

USER_AGENT = f"FlightWatch/{__version__}"


def http_get(
    url: str,
    *,
    params: dict[str, Any] | None = None,
    timeout: float = 10.0,
) -> requests.Response:
    """GET *url* and return the response, whatever its status code.

    Raises:
        TransportError: When no response was received (DNS, refused
            connection, timeout, TLS).  The message is already summarised
            for display.
    """
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}

    try:
        return requests.get(url, params=params, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as exc:
        raise TransportError(summarize_error(exc)) from exc
