"""
Tests for YAML configuration parser.
"""

import pytest

from toolchainenv.config.parser import (
    ToolchainEnvConfig,
    load_config,
    parse_config,
    parse_config_data,
)
from toolchainenv.core.exceptions import ConfigError


class TestParseConfig:
    """Test parse_config()."""

    def test_parse_sample(self, sample_config_yaml):
        """Test a complete configuration file."""
        config = parse_config(sample_config_yaml)

        assert config.version == 1
        assert config.toolchain.name == "Go"
        assert config.toolchain.key == "go"
        assert config.toolchain.manifest == "go.mod"
        assert config.toolchain.executable == "go"
        assert config.supported_range.min_version == "1.16"
        assert config.supported_range.max_version == "1.22"
        assert config.diagnostics.directory is None

    def test_missing_file(self, tmp_path):
        """Test missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            parse_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        """Test empty file raises ConfigError."""
        config_file = tmp_path / "toolchainenv.yaml"
        config_file.write_text("")

        with pytest.raises(ConfigError, match="empty"):
            parse_config(config_file)

    def test_invalid_yaml(self, tmp_path):
        """Test YAML syntax errors raise ConfigError."""
        config_file = tmp_path / "toolchainenv.yaml"
        config_file.write_text("version: 1\ntoolchain: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML syntax"):
            parse_config(config_file)


class TestParseConfigData:
    """Test parse_config_data()."""

    def test_defaults(self):
        """Test an empty mapping yields defaults."""
        config = parse_config_data({})

        assert config.toolchain.name == "Go"
        assert str(config.supported_range) == "1.11-1.21"
        assert config.diagnostics.directory is None

    def test_unsupported_version(self):
        """Test config version must be 1."""
        with pytest.raises(ConfigError, match="Unsupported version"):
            parse_config_data({"version": 2})

    def test_not_a_mapping(self):
        """Test top-level must be a mapping."""
        with pytest.raises(ConfigError, match="mapping"):
            parse_config_data(["version", 1])

    def test_unquoted_range_rejected(self):
        """Test unquoted YAML floats are rejected for range bounds."""
        with pytest.raises(ConfigError, match="quoted string"):
            parse_config_data({"supported_range": {"min": 1.2, "max": "1.21"}})

    def test_patch_level_bound_rejected(self):
        """Test range bounds must be major.minor."""
        with pytest.raises(ConfigError, match="expected major.minor"):
            parse_config_data({"supported_range": {"max": "1.21.2"}})

    def test_inverted_range_rejected(self):
        """Test min above max is rejected."""
        with pytest.raises(ConfigError):
            parse_config_data({"supported_range": {"min": "1.22", "max": "1.21"}})

    def test_partial_toolchain(self):
        """Test missing toolchain fields fall back to defaults."""
        config = parse_config_data({"toolchain": {"executable": "/opt/go/bin/go"}})

        assert config.toolchain.executable == "/opt/go/bin/go"
        assert config.toolchain.key == "go"

    def test_empty_toolchain_field_rejected(self):
        """Test blank toolchain fields are rejected."""
        with pytest.raises(ConfigError, match="toolchain.key"):
            parse_config_data({"toolchain": {"key": ""}})

    def test_diagnostics_directory(self):
        """Test diagnostics directory is read."""
        config = parse_config_data({"diagnostics": {"directory": "/tmp/diag"}})
        assert config.diagnostics.directory == "/tmp/diag"

    def test_toolchain_spec(self):
        """Test ToolchainConfig converts to a ToolchainSpec."""
        config = parse_config_data(
            {"toolchain": {"name": "Gox", "key": "gox", "manifest": "gox.mod"}}
        )
        spec = config.toolchain.spec()

        assert (spec.name, spec.key, spec.manifest) == ("Gox", "gox", "gox.mod")


class TestLoadConfig:
    """Test load_config()."""

    def test_defaults_without_file(self, tmp_path):
        """Test defaults are used when no config file exists."""
        config = load_config(tmp_path)
        assert config == ToolchainEnvConfig()

    def test_project_config_file(self, sample_config_yaml):
        """Test toolchainenv.yaml in the project root is picked up."""
        config = load_config(sample_config_yaml.parent)
        assert config.supported_range.max_version == "1.22"

    def test_explicit_path_must_exist(self, tmp_path):
        """Test an explicit config path that does not exist is an error."""
        with pytest.raises(ConfigError):
            load_config(tmp_path, tmp_path / "other.yaml")
