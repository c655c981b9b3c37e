"""
toolchainenv/workspace/scanner.py

Workspace scanning - finds the highest toolchain version required by the
modules of a Go workspace.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from toolchainenv.core.exceptions import WorkspaceScanError
from toolchainenv.core.versions import compare_versions, is_valid_version

logger = logging.getLogger(__name__)

MANIFEST_NAMES = ("go.work", "go.mod")

# Directories that never hold modules of the workspace being built.
SKIPPED_DIRS = {"vendor", "testdata", "node_modules"}

_GO_DIRECTIVE = re.compile(r"^\s*go\s+(\S+)\s*(?://.*)?$", re.MULTILINE)


@dataclass(frozen=True)
class ManifestVersion:
    """
    Version declared by the workspace manifests.

    Attributes:
        version: Highest declared version (empty if not found)
        found: Whether any manifest declared a version
        source: Manifest file the version was read from
    """

    version: str = ""
    found: bool = False
    source: Optional[Path] = None


def parse_go_directive(content: str) -> Optional[str]:
    """
    Extract the version of the ``go`` directive from go.mod/go.work content.

    Example:
        >>> parse_go_directive("module example.com/m\\n\\ngo 1.21\\n")
        '1.21'
    """
    match = _GO_DIRECTIVE.search(content)
    if match:
        return match.group(1)
    return None


class GoWorkspaceScanner:
    """
    Scan a project tree for go.work and go.mod files.

    Args:
        project_root: Root directory of the workspace
    """

    def __init__(self, project_root: Path):
        self.project_root = Path(project_root)

    def find_manifests(self) -> List[Path]:
        """
        Find manifest files under the project root.

        Hidden directories and :data:`SKIPPED_DIRS` are not descended into.

        Raises:
            WorkspaceScanError: If the project root is not a directory
        """
        if not self.project_root.is_dir():
            raise WorkspaceScanError(
                f"Project root is not a directory: {self.project_root}"
            )

        manifests = []
        for dirpath, dirnames, filenames in os.walk(self.project_root):
            dirnames[:] = sorted(
                d for d in dirnames if d not in SKIPPED_DIRS and not d.startswith(".")
            )
            for name in MANIFEST_NAMES:
                if name in filenames:
                    manifests.append(Path(dirpath) / name)

        logger.debug(f"Found {len(manifests)} manifest(s) in {self.project_root}")
        return manifests

    def read_version(self, manifest: Path) -> Optional[str]:
        """Read the ``go`` directive of one manifest, or None if unusable."""
        try:
            content = manifest.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {manifest}: {e}")
            return None

        version = parse_go_directive(content)
        if version is None:
            logger.debug(f"No go directive in {manifest}")
            return None

        if not is_valid_version(version):
            logger.warning(f"Ignoring invalid go directive '{version}' in {manifest}")
            return None

        return version

    def required_version(self) -> ManifestVersion:
        """
        Get the greatest toolchain version required by any manifest.

        Returns:
            ManifestVersion with ``found=False`` if no manifest declares one
        """
        best = ManifestVersion()

        for manifest in self.find_manifests():
            version = self.read_version(manifest)
            if version is None:
                continue
            if not best.found or compare_versions(version, best.version) > 0:
                best = ManifestVersion(version=version, found=True, source=manifest)

        if best.found:
            logger.debug(f"Workspace requires version {best.version} ({best.source})")
        else:
            logger.debug("No go directive found in workspace")

        return best


__all__ = [
    "GoWorkspaceScanner",
    "MANIFEST_NAMES",
    "ManifestVersion",
    "parse_go_directive",
]
