"""Configuration: JSON config loader and secrets lookup."""

from flightwatch.config.config_manager import load_config
from flightwatch.config.secrets_manager import SecretsManager

__all__ = ["load_config", "SecretsManager"]
