"""Configuration management for linebreak.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, environment variables
(LINEBREAK_DATA_FILE, LINEBREAK_TEST_FILE) or defaults.

Key classes:
- DataConfig: Unicode data file locations and class aliases
- ConformanceConfig: Conformance harness settings
- LoggingConfig: Logging settings
- LinebreakSettings: Main application settings
"""

from linebreak.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_CLASS_ALIASES,
    DEFAULT_SKIP_LINES,
    LINE_BREAK_FILE_NAME,
    TEST_FILE_NAME,
    UNICODE_VERSION,
    ConformanceConfig,
    DataConfig,
    LinebreakSettings,
    LoggingConfig,
    default_data_dir,
    get_default_settings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CLASS_ALIASES",
    "DEFAULT_SKIP_LINES",
    "LINE_BREAK_FILE_NAME",
    "TEST_FILE_NAME",
    "UNICODE_VERSION",
    "ConformanceConfig",
    "DataConfig",
    "LinebreakSettings",
    "LoggingConfig",
    "default_data_dir",
    "get_default_settings",
]
