"""Configuration loading for ToolchainEnv."""

from toolchainenv.config.parser import (
    CONFIG_FILENAME,
    DiagnosticsConfig,
    ToolchainConfig,
    ToolchainEnvConfig,
    load_config,
    parse_config,
    parse_config_data,
)

__all__ = [
    "CONFIG_FILENAME",
    "DiagnosticsConfig",
    "ToolchainConfig",
    "ToolchainEnvConfig",
    "load_config",
    "parse_config",
    "parse_config_data",
]
