"""Config manager — load JSON → apply env overrides → validate → FlightWatchConfig."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from flightwatch.core.models.config import FlightWatchConfig

_log = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "flightwatch_config.json"

# env var → (section, field, type)
_ENV_OVERRIDES: dict[str, tuple[str, str, type]] = {
    "FLIGHTWATCH_LOG_LEVEL": ("system", "log_level", str),
    "FLIGHTWATCH_WEBUI_PORT": ("system", "webui_port", int),
    "FLIGHTWATCH_NATIVE": ("system", "native", bool),
    "FLIGHTWATCH_API_ENDPOINT": ("api", "endpoint", str),
    "FLIGHTWATCH_POLL_INTERVAL": ("polling", "interval_seconds", float),
}


def _coerce(value: str, target_type: type) -> object:
    """Coerce a string env-var value to the expected Python type."""
    if target_type is bool:
        return value.strip().lower() in ("1", "true", "yes")
    return target_type(value)


def load_config(config_path: Path | str | None = None) -> FlightWatchConfig:
    """Load, override, and validate the configuration.

    Args:
        config_path: Path to a JSON config file.  When *None*, falls back to
            ``FLIGHTWATCH_CONFIG_FILE`` and then the bundled
            ``flightwatch_config.json``.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If the merged values are invalid.
    """
    path = _resolve_config_path(config_path)
    _log.info("Loading config from %s", path)

    raw = json.loads(path.read_text(encoding="utf-8"))

    for env_key, (section, field, typ) in _ENV_OVERRIDES.items():
        env_val = os.environ.get(env_key)
        if env_val is not None:
            raw.setdefault(section, {})[field] = _coerce(env_val, typ)
            _log.debug("Env override: %s → %s.%s = %r", env_key, section, field, env_val)

    return FlightWatchConfig(**raw)


def _resolve_config_path(config_path: Path | str | None) -> Path:
    if config_path is not None:
        p = Path(config_path)
    else:
        env = os.environ.get("FLIGHTWATCH_CONFIG_FILE")
        p = Path(env) if env else _DEFAULT_CONFIG_PATH
    if not p.is_file():
        raise FileNotFoundError(
            f"Config file not found: {p}\n"
            "Create flightwatch_config.json or set FLIGHTWATCH_CONFIG_FILE to a valid path."
        )
    return p
