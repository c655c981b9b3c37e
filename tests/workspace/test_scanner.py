"""
Unit tests for the Go workspace scanner.
"""

import logging

import pytest

from toolchainenv.core.exceptions import WorkspaceScanError
from toolchainenv.workspace.scanner import (
    GoWorkspaceScanner,
    ManifestVersion,
    parse_go_directive,
)
from tests.fixtures.projects import write_go_mod


class TestParseGoDirective:
    """Test parse_go_directive()."""

    @pytest.mark.parametrize(
        "content,expected",
        [
            ("module example.com/m\n\ngo 1.21\n", "1.21"),
            ("module m\ngo 1.21.3\ntoolchain go1.22.0\n", "1.21.3"),
            ("module m\n\n  go   1.18 // minimum\n", "1.18"),
            ("go 1.19\n\nuse ./api\n", "1.19"),
        ],
    )
    def test_directive_found(self, content, expected):
        """Test go directives are extracted."""
        assert parse_go_directive(content) == expected

    @pytest.mark.parametrize(
        "content",
        [
            "module example.com/m\n",
            "module m\ntoolchain go1.21.0\n",
            "module m\ngodebug default=go1.21\n",
            "",
        ],
    )
    def test_no_directive(self, content):
        """Test content without a go directive."""
        assert parse_go_directive(content) is None


class TestGoWorkspaceScanner:
    """Test GoWorkspaceScanner."""

    def test_single_module(self, go_module_project):
        """Test version of a single go.mod."""
        result = GoWorkspaceScanner(go_module_project).required_version()

        assert result.found is True
        assert result.version == "1.18"
        assert result.source == go_module_project / "go.mod"

    def test_workspace_takes_highest(self, go_workspace_project):
        """Test the greatest version across go.work and go.mod files wins."""
        result = GoWorkspaceScanner(go_workspace_project).required_version()

        assert result.found is True
        assert result.version == "1.20.3"
        assert result.source == go_workspace_project / "api" / "go.mod"

    def test_skips_vendor_and_hidden(self, go_workspace_project):
        """Test vendor and hidden directories are not scanned."""
        manifests = GoWorkspaceScanner(go_workspace_project).find_manifests()

        assert go_workspace_project / "go.work" in manifests
        assert all("vendor" not in m.parts for m in manifests)
        assert all(".cache" not in m.parts for m in manifests)
        assert len(manifests) == 3

    def test_no_directive(self, go_project_without_directive):
        """Test a go.mod without directive is not found."""
        result = GoWorkspaceScanner(go_project_without_directive).required_version()

        assert result == ManifestVersion()

    def test_empty_project(self, tmp_path):
        """Test a project without manifests."""
        result = GoWorkspaceScanner(tmp_path).required_version()

        assert result.found is False
        assert result.version == ""

    def test_invalid_directive_skipped(self, tmp_path, caplog):
        """Test unparsable versions are ignored with a warning."""
        write_go_mod(tmp_path / "bad", "example.com/bad", "latest")
        write_go_mod(tmp_path / "good", "example.com/good", "1.17")

        with caplog.at_level(logging.WARNING):
            result = GoWorkspaceScanner(tmp_path).required_version()

        assert result.version == "1.17"
        assert "Ignoring invalid go directive 'latest'" in caplog.text

    def test_numeric_ordering(self, tmp_path):
        """Test 1.9 sorts below 1.10."""
        write_go_mod(tmp_path / "a", "example.com/a", "1.9")
        write_go_mod(tmp_path / "b", "example.com/b", "1.10")

        assert GoWorkspaceScanner(tmp_path).required_version().version == "1.10"

    def test_missing_root_raises(self, tmp_path):
        """Test scanning a missing directory raises."""
        with pytest.raises(WorkspaceScanError, match="not a directory"):
            GoWorkspaceScanner(tmp_path / "missing").required_version()
