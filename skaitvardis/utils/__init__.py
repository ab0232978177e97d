"""Utilities: logging."""

from skaitvardis.utils.logging import console, setup_logger

__all__ = ["console", "setup_logger"]
