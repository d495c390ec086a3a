"""Logging setup and contextual logger."""

from flightwatch.logging.logger import ContextualLogger, setup_logging

__all__ = ["setup_logging", "ContextualLogger"]
