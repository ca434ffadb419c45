"""Shared utilities for ReliableTXT processing.

This module provides the exception hierarchy, configuration objects and
logging helpers used across all layers.
"""

from .config import (
    BenchmarkConfig,
    ConfigError,
    ConfigValidationError,
    DocumentConfig,
    GlobalConfig,
    ReliableTxtConfig,
)
from .errors import (
    InvalidCodePointError,
    InvalidEncodingError,
    MissingPreambleError,
    ReliableTxtError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "BenchmarkConfig",
    "ConfigError",
    "ConfigValidationError",
    "DocumentConfig",
    "GlobalConfig",
    "ReliableTxtConfig",
    "InvalidCodePointError",
    "InvalidEncodingError",
    "MissingPreambleError",
    "ReliableTxtError",
    "CorrelationLogger",
    "get_logger",
]
