"""
Centralized exception hierarchy for ToolchainEnv.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ToolchainEnvError(Exception):
    """Base exception for all ToolchainEnv errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(ToolchainEnvError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Version Exceptions
# ============================================================================


class InvalidVersionError(ToolchainEnvError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid version: {version!r}")


# ============================================================================
# Workspace Exceptions
# ============================================================================


class WorkspaceScanError(ToolchainEnvError):
    """Raised when the workspace to scan does not exist or is not a directory."""

    pass
