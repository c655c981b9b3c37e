"""Test fixtures for ToolchainEnv tests.

This package provides reusable pytest fixtures for testing ToolchainEnv components.
Fixtures are organized by type:

- projects: Go module and workspace layouts
- toolchains: Fake workspace scanners and environment probes

Import fixtures in your tests using:
    from tests.fixtures.projects import go_module_project
    from tests.fixtures.toolchains import fake_probe
"""

__all__ = [
    "toolchains",
    "projects",
]
