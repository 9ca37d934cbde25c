"""Observability – structlog configuration and logger lookup."""
from mp_features.observability.logging.factory import JsonLoggerFactory
from mp_features.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
