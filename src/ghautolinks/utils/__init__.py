"""Shared utilities for ghautolinks."""

from ghautolinks.utils.logger import get_logger

__all__ = ["get_logger"]
