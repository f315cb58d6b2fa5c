"""Utility modules for replaygen.

Provides:
- Structured logging configuration
"""

from .logging import configure_logging, get_logger

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
]
