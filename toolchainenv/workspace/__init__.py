"""Workspace scanning for ToolchainEnv."""

from toolchainenv.workspace.scanner import (
    GoWorkspaceScanner,
    MANIFEST_NAMES,
    ManifestVersion,
    parse_go_directive,
)

__all__ = [
    "GoWorkspaceScanner",
    "MANIFEST_NAMES",
    "ManifestVersion",
    "parse_go_directive",
]
