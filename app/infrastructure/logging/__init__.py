"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the translation editor using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import bind_request_context

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
]
