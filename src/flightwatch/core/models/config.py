"""Configuration Pydantic models: FlightWatchConfig and its sections."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApiConfig(BaseModel):
    """Flight-data provider settings.

    The access key itself is never stored here; ``api_key_name`` names the
    secret that :class:`~flightwatch.config.secrets_manager.SecretsManager`
    resolves at startup.
    """

    model_config = ConfigDict(extra="forbid")

    endpoint: str = Field(
        default="http://api.aviationstack.com/v1/flights",
        description="Flights endpoint queried with access_key and flight_iata",
    )
    api_key_name: str = Field(
        default="FLIGHTWATCH_AVIATIONSTACK_API_KEY",
        description="Secret holding the provider access key",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0, description="Per-request timeout")


class PollingConfig(BaseModel):
    """Poll loop behaviour."""

    model_config = ConfigDict(extra="forbid")

    interval_seconds: float = Field(default=300.0, gt=0, description="Sleep between polls")
    first_status_is_change: bool = Field(
        default=True,
        description="Treat the first observed status as a change (stops the session)",
    )


class SystemConfig(BaseModel):
    """Runtime settings unrelated to the provider."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    event_bus_queue_size: int = Field(default=1000, description="Max queued events")
    webui_port: int = Field(default=8080, description="NiceGUI listen port")
    native: bool = Field(default=False, description="Open in a native window (needs pywebview)")
    window_title: str = Field(default="Flight Info", description="Window / page title")


class FlightWatchConfig(BaseModel):
    """Top-level configuration loaded from ``flightwatch_config.json``."""

    model_config = ConfigDict(extra="forbid")

    api: ApiConfig = Field(default_factory=ApiConfig)
    polling: PollingConfig = Field(default_factory=PollingConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
