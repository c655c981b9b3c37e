"""
Pytest configuration and shared fixtures for ToolchainEnv tests.
"""

import pytest
from pathlib import Path

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.projects import (
    go_module_project,
    go_workspace_project,
    go_project_without_directive,
)
from tests.fixtures.toolchains import (
    fake_scanner,
    fake_probe,
)

from toolchainenv.core.versions import SupportedRange


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that need a real go installation",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def supported_range() -> SupportedRange:
    """Supported range used throughout the decision tests (1.11-1.21)."""
    return SupportedRange(min_version="1.11", max_version="1.21")


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create sample toolchainenv.yaml configuration."""
    config_content = """version: 1
toolchain:
  name: Go
  key: go
  manifest: go.mod
  executable: go
supported_range:
  min: "1.16"
  max: "1.22"
diagnostics:
  directory: null
"""
    config_file = tmp_path / "toolchainenv.yaml"
    config_file.write_text(config_content)
    return config_file
