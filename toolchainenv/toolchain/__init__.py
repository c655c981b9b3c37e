"""
Toolchain detection for ToolchainEnv.

This module provides functionality for:
- Locating the toolchain executable on PATH
- Extracting the installed toolchain version
"""

from toolchainenv.toolchain.probe import (
    EnvironmentVersion,
    GoEnvironmentProbe,
    PROBE_TIMEOUT,
    parse_go_version_output,
)

__all__ = [
    "EnvironmentVersion",
    "GoEnvironmentProbe",
    "PROBE_TIMEOUT",
    "parse_go_version_output",
]
