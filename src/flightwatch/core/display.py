"""Shared text buffer written by poll sessions and read by the UI."""

from __future__ import annotations

import threading


class DisplayText:
    """Mutex-guarded string holding what the text area shows.

    Writers replace the whole text.  Concurrent sessions may overwrite each
    other; the last write wins.
    """

    def __init__(self, initial: str = "") -> None:
        self._lock = threading.Lock()
        self._text = initial
        self._writes = 0

    @property
    def text(self) -> str:
        with self._lock:
            return self._text

    @property
    def write_count(self) -> int:
        with self._lock:
            return self._writes

    def set_text(self, text: str) -> None:
        with self._lock:
            self._text = text
            self._writes += 1
