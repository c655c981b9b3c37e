"""YAML configuration parser for ToolchainEnv.

This module provides parsing and validation for toolchainenv.yaml configuration files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from toolchainenv.core.exceptions import ConfigError
from toolchainenv.core.versions import (
    DEFAULT_MAX_VERSION,
    DEFAULT_MIN_VERSION,
    SupportedRange,
)
from toolchainenv.environment.models import ToolchainSpec

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "toolchainenv.yaml"


@dataclass
class ToolchainConfig:
    """Configuration of the toolchain being recommended."""

    name: str = "Go"
    key: str = "go"  # Key of the JSON object written to stdout
    manifest: str = "go.mod"
    executable: str = "go"

    def spec(self) -> ToolchainSpec:
        return ToolchainSpec(name=self.name, key=self.key, manifest=self.manifest)


@dataclass
class DiagnosticsConfig:
    """Where decision diagnostics are written."""

    directory: Optional[str] = None  # JSON diagnostic files, logging only if None


@dataclass
class ToolchainEnvConfig:
    """Complete ToolchainEnv configuration."""

    version: int = 1
    toolchain: ToolchainConfig = field(default_factory=ToolchainConfig)
    supported_range: SupportedRange = field(default_factory=SupportedRange)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def parse_config(config_path: Path) -> ToolchainEnvConfig:
    """
    Parse toolchainenv.yaml configuration file.

    Args:
        config_path: Path to toolchainenv.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    return parse_config_data(data)


def load_config(
    project_root: Path, config_path: Optional[Path] = None
) -> ToolchainEnvConfig:
    """
    Load configuration for a project, falling back to defaults.

    An explicit ``config_path`` must exist. Otherwise ``toolchainenv.yaml``
    in ``project_root`` is used if present.

    Raises:
        ConfigError: If the configuration file is missing or invalid
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    default_path = Path(project_root) / CONFIG_FILENAME
    if default_path.exists():
        logger.debug(f"Loading configuration from {default_path}")
        return parse_config(default_path)

    logger.debug("No configuration file found, using defaults")
    return ToolchainEnvConfig()


def parse_config_data(data: dict) -> ToolchainEnvConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    version = data.get("version", 1)
    if version != 1:
        raise ConfigError(f"Unsupported version: {version} (expected 1)")

    return ToolchainEnvConfig(
        version=version,
        toolchain=_parse_toolchain(data.get("toolchain") or {}),
        supported_range=_parse_supported_range(data.get("supported_range") or {}),
        diagnostics=_parse_diagnostics(data.get("diagnostics") or {}),
    )


def _parse_toolchain(data: dict) -> ToolchainConfig:
    """Parse toolchain section."""
    if not isinstance(data, dict):
        raise ConfigError("'toolchain' must be a mapping")

    defaults = ToolchainConfig()
    values = {}
    for name in ("name", "key", "manifest", "executable"):
        value = data.get(name, getattr(defaults, name))
        if not isinstance(value, str) or not value:
            raise ConfigError(f"toolchain.{name} must be a non-empty string")
        values[name] = value

    return ToolchainConfig(**values)


def _parse_supported_range(data: dict) -> SupportedRange:
    """Parse supported_range section."""
    if not isinstance(data, dict):
        raise ConfigError("'supported_range' must be a mapping")

    # YAML reads an unquoted 1.20 as the float 1.2, which changes its meaning.
    bounds = {}
    for name, default in (("min", DEFAULT_MIN_VERSION), ("max", DEFAULT_MAX_VERSION)):
        value = data.get(name, default)
        if not isinstance(value, str):
            raise ConfigError(
                f"supported_range.{name} must be a quoted string, got {value!r}"
            )
        bounds[name] = value

    return SupportedRange(min_version=bounds["min"], max_version=bounds["max"])


def _parse_diagnostics(data: dict) -> DiagnosticsConfig:
    """Parse diagnostics section."""
    if not isinstance(data, dict):
        raise ConfigError("'diagnostics' must be a mapping")

    directory = data.get("directory")
    if directory is not None and not isinstance(directory, str):
        raise ConfigError("diagnostics.directory must be a string")

    return DiagnosticsConfig(directory=directory)


__all__ = [
    "CONFIG_FILENAME",
    "DiagnosticsConfig",
    "ToolchainConfig",
    "ToolchainEnvConfig",
    "load_config",
    "parse_config",
    "parse_config_data",
]
