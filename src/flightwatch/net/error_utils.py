"""Turn ``requests`` exceptions into short messages for the text display."""

from __future__ import annotations

import requests


def summarize_error(err: Exception, max_len: int = 120) -> str:
    """Return a concise human-readable summary for a network exception."""
    if isinstance(err, requests.exceptions.ConnectTimeout):
        msg = "Connect timeout"
    elif isinstance(err, requests.exceptions.ReadTimeout):
        msg = "Read timeout"
    elif isinstance(err, requests.exceptions.Timeout):
        msg = "Timeout"
    elif isinstance(err, requests.exceptions.SSLError):
        msg = "TLS/SSL error"
    elif isinstance(err, requests.exceptions.TooManyRedirects):
        msg = "Too many redirects"
    elif isinstance(err, requests.exceptions.InvalidURL):
        msg = f"Invalid URL: {err}"
    elif isinstance(err, requests.exceptions.ConnectionError):
        raw = str(err)
        if "Name or service not known" in raw or "Temporary failure" in raw:
            msg = "DNS failure"
        elif "Connection refused" in raw:
            msg = "Connection refused"
        elif "Failed to establish" in raw or "NewConnectionError" in raw:
            msg = "Connection failed"
        else:
            msg = "Connection error"
    else:
        msg = str(err) or err.__class__.__name__

    if len(msg) > max_len:
        msg = msg[: max_len - 3] + "..."
    return msg
