"""Core utilities and shared components for cos-tools."""

from .config import settings
from .exceptions import CosToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "CosToolsError", "ValidationError", "get_logger", "get_tracer"]
