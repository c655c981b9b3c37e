"""Reusable Go workspace fixtures for testing.

This module provides pytest fixtures that create realistic Go module and
workspace layouts for testing manifest scanning and environment identification.
"""

import pytest
from pathlib import Path


def write_go_mod(directory: Path, module: str, go_version: str = None) -> Path:
    """Write a go.mod file, with a go directive if ``go_version`` is given."""
    directory.mkdir(parents=True, exist_ok=True)
    content = f"module {module}\n"
    if go_version is not None:
        content += f"\ngo {go_version}\n"
    go_mod = directory / "go.mod"
    go_mod.write_text(content)
    return go_mod


@pytest.fixture
def go_module_project(tmp_path) -> Path:
    """
    Create a single-module Go project requiring go 1.18.

    Creates:
    - go.mod (go 1.18)
    - main.go

    Returns:
        Path to project root directory
    """
    project_root = tmp_path / "go_module"
    write_go_mod(project_root, "example.com/app", "1.18")
    (project_root / "main.go").write_text(
        'package main\n\nimport "fmt"\n\nfunc main() { fmt.Println("hi") }\n'
    )
    return project_root


@pytest.fixture
def go_workspace_project(tmp_path) -> Path:
    """
    Create a multi-module Go workspace.

    Creates:
    - go.work (go 1.19) using ./api and ./worker
    - api/go.mod (go 1.20.3)
    - worker/go.mod (go 1.16)
    - vendor/example.com/dep/go.mod (go 1.99, must be ignored)
    - .cache/go.mod (go 1.98, must be ignored)

    Returns:
        Path to project root directory
    """
    project_root = tmp_path / "go_workspace"
    project_root.mkdir()
    (project_root / "go.work").write_text("go 1.19\n\nuse (\n\t./api\n\t./worker\n)\n")
    write_go_mod(project_root / "api", "example.com/api", "1.20.3")
    write_go_mod(project_root / "worker", "example.com/worker", "1.16")
    write_go_mod(project_root / "vendor" / "example.com" / "dep", "example.com/dep", "1.99")
    write_go_mod(project_root / ".cache", "example.com/cache", "1.98")
    return project_root


@pytest.fixture
def go_project_without_directive(tmp_path) -> Path:
    """Create a Go project whose go.mod has no go directive."""
    project_root = tmp_path / "go_legacy"
    write_go_mod(project_root, "example.com/legacy")
    return project_root
