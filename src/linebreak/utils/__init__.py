"""Utility functions for linebreak.

This module provides utility functions including:

- Logging setup and configuration
- Conformance run statistics
"""

from linebreak.utils.logging import (
    ConformanceFailure,
    ConformanceLogger,
    ConformanceStats,
    configure_logging,
)

__all__ = [
    "ConformanceFailure",
    "ConformanceLogger",
    "ConformanceStats",
    "configure_logging",
]
