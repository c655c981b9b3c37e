"""
Core functionality for ToolchainEnv.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    ToolchainEnvError,
    ConfigError,
    InvalidVersionError,
    WorkspaceScanError,
)

from .versions import (
    DEFAULT_SUPPORTED_RANGE,
    SupportedRange,
    above_range,
    below_range,
    compare_versions,
    is_valid_version,
    major_minor,
    outside_range,
)

__all__ = [
    "ToolchainEnvError",
    "ConfigError",
    "InvalidVersionError",
    "WorkspaceScanError",
    "DEFAULT_SUPPORTED_RANGE",
    "SupportedRange",
    "above_range",
    "below_range",
    "compare_versions",
    "is_valid_version",
    "major_minor",
    "outside_range",
]
