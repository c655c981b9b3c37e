"""
Toolchain version comparison.

Versions are compared with ``packaging.version``. Range checks only look at
the major.minor part, so 1.20.1 and 1.20 are considered equal when deciding
whether a version is supported.
"""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from packaging import version as pkg_version

from toolchainenv.core.exceptions import ConfigError, InvalidVersionError

logger = logging.getLogger(__name__)

DEFAULT_MIN_VERSION = "1.11"
DEFAULT_MAX_VERSION = "1.21"

# Bounds are plain major.minor: no patch level, no prefix.
_BOUND = re.compile(r"^\d+\.\d+$")


def _parse(version_str: str) -> pkg_version.Version:
    """
    Parse a toolchain version string.

    A leading ``go`` prefix (as printed by ``go version``) is stripped;
    ``packaging`` already tolerates a leading ``v``.

    Raises:
        InvalidVersionError: If the string is not a valid version
    """
    text = version_str.strip()
    if text.startswith("go"):
        text = text[2:]
    try:
        return pkg_version.Version(text)
    except pkg_version.InvalidVersion as e:
        raise InvalidVersionError(version_str) from e


def is_valid_version(version_str: str) -> bool:
    """Check if ``version_str`` can be compared as a toolchain version."""
    try:
        _parse(version_str)
        return True
    except InvalidVersionError:
        return False


def major_minor(version_str: str) -> Tuple[int, int]:
    """
    Get the (major, minor) pair of a version, ignoring patch and pre-release.

    Example:
        >>> major_minor("1.20.1")
        (1, 20)
    """
    release = _parse(version_str).release
    minor = release[1] if len(release) > 1 else 0
    return release[0], minor


def compare_versions(left: str, right: str) -> int:
    """
    Compare two versions with full precision.

    Returns:
        -1 if ``left`` is lower, 0 if equal, 1 if ``left`` is higher
    """
    a = _parse(left)
    b = _parse(right)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


@dataclass(frozen=True)
class SupportedRange:
    """
    Inclusive window of toolchain versions that may be recommended.

    Attributes:
        min_version: Oldest supported version (major.minor)
        max_version: Newest supported version (major.minor)
    """

    min_version: str = DEFAULT_MIN_VERSION
    max_version: str = DEFAULT_MAX_VERSION

    def __post_init__(self):
        for bound in (self.min_version, self.max_version):
            if not isinstance(bound, str) or not _BOUND.match(bound):
                raise ConfigError(
                    f"Invalid supported range bound: {bound!r} (expected major.minor)"
                )
        if major_minor(self.min_version) > major_minor(self.max_version):
            raise ConfigError(
                f"Minimum supported version {self.min_version} is above "
                f"maximum supported version {self.max_version}"
            )

    def below(self, version_str: str) -> bool:
        """Check if ``version_str`` is lower than the minimum supported version."""
        return major_minor(version_str) < major_minor(self.min_version)

    def above(self, version_str: str) -> bool:
        """Check if ``version_str`` is higher than the maximum supported version."""
        return major_minor(version_str) > major_minor(self.max_version)

    def outside(self, version_str: str) -> bool:
        return self.below(version_str) or self.above(version_str)

    def contains(self, version_str: str) -> bool:
        return not self.outside(version_str)

    def __str__(self) -> str:
        return f"{self.min_version}-{self.max_version}"


DEFAULT_SUPPORTED_RANGE = SupportedRange()


def below_range(
    version_str: str, supported: SupportedRange = DEFAULT_SUPPORTED_RANGE
) -> bool:
    """Check if ``version_str`` is below the supported range (major.minor only)."""
    return supported.below(version_str)


def above_range(
    version_str: str, supported: SupportedRange = DEFAULT_SUPPORTED_RANGE
) -> bool:
    """Check if ``version_str`` is above the supported range (major.minor only)."""
    return supported.above(version_str)


def outside_range(
    version_str: str, supported: SupportedRange = DEFAULT_SUPPORTED_RANGE
) -> bool:
    """Check if ``version_str`` is below or above the supported range."""
    return supported.outside(version_str)


__all__ = [
    "DEFAULT_MIN_VERSION",
    "DEFAULT_MAX_VERSION",
    "DEFAULT_SUPPORTED_RANGE",
    "SupportedRange",
    "above_range",
    "below_range",
    "compare_versions",
    "is_valid_version",
    "major_minor",
    "outside_range",
]
