"""Utility functions for pathbool.

This module provides utility functions including:

- Logging setup and configuration
- Operation statistics tracking
"""

from pathbool.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
