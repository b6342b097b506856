"""
Logging configuration and utilities for the array helpers.
"""
from .config import build_processors, configure_logging, configure_from_params, get_logger

__all__ = ["build_processors", "configure_logging", "configure_from_params", "get_logger"]
