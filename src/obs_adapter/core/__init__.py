"""Core utilities and shared components for obs-adapter."""

from .config import settings
from .exceptions import ObsAdapterError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "ObsAdapterError", "ValidationError", "get_logger", "get_tracer"]
