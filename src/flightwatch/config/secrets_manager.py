"""Read-only secrets lookup with lazy file loading.

Precedence: ``os.environ`` → secrets file → caller-supplied default.

The secrets file is the first that exists of:
1. ``FLIGHTWATCH_SECRETS_FILE`` environment variable
2. ``secrets/secrets.env`` (working directory)
3. ``/etc/flightwatch/secrets.env``

File format: ``KEY=VALUE`` lines.  ``#`` comments and blank lines are
ignored.  Surrounding quotes on values are stripped.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

_log = logging.getLogger(__name__)

_DEFAULT_PATHS: list[str] = [
    "secrets/secrets.env",
    "/etc/flightwatch/secrets.env",
]


class SecretsManager:
    """Thread-safe, lazily loaded secrets store."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loaded = False
        self._store: dict[str, str] = {}

    def get(self, key: str, default: str = "") -> str:
        """Return the value for *key*: process env → secrets file → *default*."""
        env_val = os.environ.get(key)
        if env_val is not None:
            return env_val

        self._ensure_loaded()
        return self._store.get(key, default)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            path = self._resolve_path()
            if path is None:
                _log.debug("No secrets file found — only os.environ will be used")
            else:
                _log.info("Loading secrets from %s", path)
                self._store = self._parse_env_file(path)
            self._loaded = True

    @staticmethod
    def _resolve_path() -> Path | None:
        explicit = os.environ.get("FLIGHTWATCH_SECRETS_FILE")
        if explicit:
            p = Path(explicit)
            if p.is_file():
                return p
            _log.warning("FLIGHTWATCH_SECRETS_FILE=%s does not exist", explicit)
            return None

        for candidate in _DEFAULT_PATHS:
            p = Path(candidate)
            if p.is_file():
                return p
        return None

    @staticmethod
    def _parse_env_file(path: Path) -> dict[str, str]:
        store: dict[str, str] = {}
        for lineno, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                _log.warning("Ignoring malformed line %d in %s", lineno, path)
                continue
            key, _, value = line.partition("=")
            store[key.strip()] = value.strip().strip("\"'")
        return store
