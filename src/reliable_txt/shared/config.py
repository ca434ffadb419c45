"""Configuration classes for ReliableTXT processing.

This module provides configuration objects for documents, benchmarks and
global behavior, with JSON round-tripping and nested overrides.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

# Mirrors the ReliableTxtEncoding values in character/encoding.py; shared
# does not import character, so keep the two lists in step
VALID_ENCODING_NAMES = ["utf-8", "utf-16", "utf-16-reverse", "utf-32"]

_COMPONENT_FIELDS = ["document", "benchmark", "global_"]


@dataclass
class DocumentConfig:
    """Configuration for newly created documents."""

    default_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate document configuration."""
        if self.default_encoding not in VALID_ENCODING_NAMES:
            raise ValueError(
                f"default_encoding must be one of {VALID_ENCODING_NAMES}"
            )


@dataclass
class BenchmarkConfig:
    """Configuration for codec benchmarking."""

    iterations: int = 5
    warmup_iterations: int = 1
    text_sizes: List[int] = field(default_factory=lambda: [1_000, 100_000])
    track_memory: bool = True

    def __post_init__(self) -> None:
        """Validate benchmark configuration."""
        if self.iterations <= 0:
            raise ValueError("iterations must be > 0")
        if self.warmup_iterations < 0:
            raise ValueError("warmup_iterations must be >= 0")
        if not self.text_sizes:
            raise ValueError("text_sizes must not be empty")
        if any(size <= 0 for size in self.text_sizes):
            raise ValueError("text_sizes must contain only values > 0")


@dataclass
class GlobalConfig:
    """Global configuration settings that apply across all components."""

    logging_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    enable_correlation_tracking: bool = True

    def __post_init__(self) -> None:
        """Validate global configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level not in valid_levels:
            raise ValueError(f"logging_level must be one of {valid_levels}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ReliableTxtConfig:
    """Complete configuration for documents, benchmarks and logging.

    Immutable, so a single instance can be shared between threads.
    """

    document: DocumentConfig = field(default_factory=DocumentConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    version: str = "1.0.0"
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.document.__post_init__()
            self.benchmark.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        if self.benchmark.warmup_iterations > self.benchmark.iterations * 10:
            raise ConfigValidationError(
                "benchmark.warmup_iterations is more than ten times "
                "benchmark.iterations",
                field_name="benchmark.warmup_iterations",
                suggestions=["Reduce benchmark.warmup_iterations",
                             "Increase benchmark.iterations"]
            )

    def override(self, **kwargs: Any) -> "ReliableTxtConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override; ``component__field`` addresses a
                field of a nested component configuration

        Returns:
            New ReliableTxtConfig instance with overrides applied

        Example:
            >>> config = ReliableTxtConfig()
            >>> new_config = config.override(
            ...     document__default_encoding="utf-16",
            ...     benchmark__iterations=10
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields = {}
        try:
            for field_name in _COMPONENT_FIELDS:
                current_config = getattr(self, field_name)
                if field_name in nested_overrides:
                    new_fields[field_name] = replace(
                        current_config, **nested_overrides[field_name]
                    )
                else:
                    new_fields[field_name] = current_config
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        for key, value in nested_overrides.items():
            if key not in _COMPONENT_FIELDS:
                new_fields[key] = value

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, (list, tuple, set)):
                return [_dataclass_to_dict(item) for item in obj]
            if isinstance(obj, dict):
                return {key: _dataclass_to_dict(value) for key, value in obj.items()}
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReliableTxtConfig":
        """Create configuration from dictionary.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        components = {
            "document": DocumentConfig,
            "benchmark": BenchmarkConfig,
            "global_": GlobalConfig,
        }

        field_values: Dict[str, Any] = {}
        try:
            for name, component_class in components.items():
                if name in data:
                    known = component_class.__dataclass_fields__
                    values = {
                        key: value for key, value in data[name].items()
                        if key in known
                    }
                    field_values[name] = component_class(**values)
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        for name in ("version", "name", "description"):
            if name in data:
                field_values[name] = data[name]

        return cls(**field_values)

    @classmethod
    def from_json(cls, json_str: str) -> "ReliableTxtConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def quick(cls) -> "ReliableTxtConfig":
        """Create preset for fast smoke benchmarks."""
        return cls(
            benchmark=BenchmarkConfig(
                iterations=2,
                warmup_iterations=0,
                text_sizes=[1_000],
                track_memory=False
            ),
            name="quick",
            description="Small inputs and few iterations for fast feedback"
        )

    @classmethod
    def thorough(cls) -> "ReliableTxtConfig":
        """Create preset for stable benchmark numbers."""
        return cls(
            benchmark=BenchmarkConfig(
                iterations=20,
                warmup_iterations=3,
                text_sizes=[1_000, 100_000, 1_000_000],
                track_memory=True
            ),
            global_=GlobalConfig(logging_level="WARNING"),
            name="thorough",
            description="Large inputs and many iterations for stable timings"
        )
