"""
toolchainenv/toolchain/probe.py

Environment probing - detects the toolchain already installed on the system.
"""

import logging
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from toolchainenv.core.versions import is_valid_version

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 10

# "go version go1.21.3 linux/amd64"
_GO_VERSION = re.compile(r"\bgo(\d+\.\d+(?:\.\d+)?(?:(?:rc|beta)\d+)?)\b")


@dataclass(frozen=True)
class EnvironmentVersion:
    """
    Toolchain found in the environment.

    Attributes:
        version: Installed version without the ``go`` prefix (empty if not found)
        found: Whether a usable installation was found
        path: Resolved executable path
    """

    version: str = ""
    found: bool = False
    path: Optional[Path] = None


def parse_go_version_output(output: str) -> Optional[str]:
    """
    Extract the version from ``go version`` output.

    Example:
        >>> parse_go_version_output("go version go1.21.3 linux/amd64")
        '1.21.3'
    """
    match = _GO_VERSION.search(output)
    if match:
        return match.group(1)
    return None


class GoEnvironmentProbe:
    """
    Detect the Go toolchain resolvable on PATH.

    Args:
        executable: Name or path of the go executable
        timeout: Seconds to wait for ``go version``
    """

    def __init__(self, executable: str = "go", timeout: float = PROBE_TIMEOUT):
        self.executable = executable
        self.timeout = timeout

    def find_executable(self) -> Optional[Path]:
        path = shutil.which(self.executable)
        if path:
            return Path(path)
        return None

    def detect(self) -> EnvironmentVersion:
        """
        Run ``go version`` and parse its output.

        Returns:
            EnvironmentVersion with ``found=False`` if go is missing or unusable
        """
        path = self.find_executable()
        if path is None:
            logger.debug(f"{self.executable} not found in PATH")
            return EnvironmentVersion()

        try:
            result = subprocess.run(
                [str(path), "version"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Timeout running {path} version")
            return EnvironmentVersion()
        except OSError as e:
            logger.debug(f"Failed to run {path} version: {e}")
            return EnvironmentVersion()

        if result.returncode != 0:
            logger.debug(f"{path} version returned {result.returncode}")
            return EnvironmentVersion()

        version = parse_go_version_output(result.stdout)
        if version is None or not is_valid_version(version):
            logger.debug(f"Could not parse version from output: {result.stdout[:200]}")
            return EnvironmentVersion()

        logger.debug(f"Found go {version} at {path}")
        return EnvironmentVersion(version=version, found=True, path=path)


__all__ = [
    "EnvironmentVersion",
    "GoEnvironmentProbe",
    "PROBE_TIMEOUT",
    "parse_go_version_output",
]
