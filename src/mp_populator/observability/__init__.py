"""Observability – structured logging helpers."""
from mp_populator.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
