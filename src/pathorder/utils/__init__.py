"""Utility functions for pathorder.

This module provides:

- Logging setup and configuration
- Optimization statistics
"""

from pathorder.utils.logging import (
    OptimizationStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "OptimizationStats",
    "configure_logging",
    "get_logger",
]
