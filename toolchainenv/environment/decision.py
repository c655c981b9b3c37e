"""
Decide which toolchain version to install before building a workspace.

The decision is a table keyed by the classification of the manifest version
and of the installed version. Every one of the 16 cells is present in
:data:`DECISION_TABLE`; most cells resolve to a fixed diagnostic code, the
two that depend on the concrete versions hold a resolver function.

::

    +-------------------+---------------+---------------+---------------------------------+---------------------------------+
    | Manifest >        | None          | Below min     | In supported range              | Above max                       |
    | Installed v       |               |               |                                 |                                 |
    +-------------------+---------------+---------------+---------------------------------+---------------------------------+
    | None              | Install max   | Install min   | Install manifest version        | Install max                     |
    | Below min         | Install max   | Install min   | Install manifest version        | Install max                     |
    | In supported range| No action     | No action     | Install manifest version if     | Install max if newer than       |
    |                   |               |               | newer than installed            | installed                       |
    | Above max         | Install max   | Install min   | Install manifest version        | No action                       |
    +-------------------+---------------+---------------+---------------------------------+---------------------------------+

A recommended version is never outside the supported range.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from toolchainenv.core.versions import (
    DEFAULT_SUPPORTED_RANGE,
    SupportedRange,
    compare_versions,
    is_valid_version,
)
from toolchainenv.environment.diagnostics import (
    DiagnosticCode,
    DiagnosticsSink,
    NullDiagnosticsSink,
)
from toolchainenv.environment.models import (
    DEFAULT_TOOLCHAIN,
    Recommendation,
    ToolchainSpec,
    VersionInfo,
)

logger = logging.getLogger(__name__)


class VersionState(Enum):
    """Classification of a version against the supported range."""

    ABSENT = "absent"
    BELOW_RANGE = "below-range"
    IN_RANGE = "in-range"
    ABOVE_RANGE = "above-range"


class InstallTarget(Enum):
    """Which version a decision branch asks to install."""

    NONE = "none"
    MIN = "min"
    MAX = "max"
    MANIFEST = "manifest"


@dataclass(frozen=True)
class Outcome:
    """Action and message template of one decision branch."""

    target: InstallTarget
    template: str


_MOD_ABOVE = (
    "The version of {name} found in the `{manifest}` file ({mod}) is above the "
    "supported range ({min}-{max}). "
)
_MOD_BELOW = (
    "The version of {name} found in the `{manifest}` file ({mod}) is below the "
    "supported range ({min}-{max}). "
)
_REQUEST_MAX = "Requesting the maximum supported version of {name} ({max})."
_REQUEST_MIN = "Requesting the minimum supported version of {name} ({min})."
_REQUEST_MOD = "Requesting the version of {name} from the `{manifest}` file ({mod})."
_NO_REQUEST = "Not requesting any version of {name}."
_ENV_HIGH_ENOUGH = (
    "The version of {name} installed in the environment ({env}) is supported and "
    "is high enough for the version found in the `{manifest}` file ({mod}). "
)

OUTCOMES: Dict[DiagnosticCode, Outcome] = {
    DiagnosticCode.NO_MANIFEST_AND_NO_ENV: Outcome(
        InstallTarget.MAX,
        "No version of {name} installed and no `{manifest}` file found. "
        + _REQUEST_MAX,
    ),
    DiagnosticCode.NO_MANIFEST_AND_ENV_BELOW_RANGE: Outcome(
        InstallTarget.MAX,
        "No `{manifest}` file found. The version of {name} installed in the "
        "environment ({env}) is outside of the supported range ({min}-{max}). "
        + _REQUEST_MAX,
    ),
    DiagnosticCode.NO_MANIFEST_AND_ENV_ABOVE_RANGE: Outcome(
        InstallTarget.MAX,
        "No `{manifest}` file found. The version of {name} installed in the "
        "environment ({env}) is outside of the supported range ({min}-{max}). "
        + _REQUEST_MAX,
    ),
    DiagnosticCode.NO_MANIFEST_AND_ENV_SUPPORTED: Outcome(
        InstallTarget.NONE,
        "No `{manifest}` file found. Version {env} installed in the environment "
        "is supported. " + _NO_REQUEST,
    ),
    DiagnosticCode.MANIFEST_TOO_HIGH_AND_NO_ENV: Outcome(
        InstallTarget.MAX,
        _MOD_ABOVE + "No version of {name} installed. " + _REQUEST_MAX,
    ),
    DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_TOO_HIGH: Outcome(
        InstallTarget.NONE,
        _MOD_ABOVE
        + "The version of {name} installed in the environment ({env}) is above "
        "the supported range ({min}-{max}). " + _NO_REQUEST,
    ),
    DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_TOO_LOW: Outcome(
        InstallTarget.MAX,
        _MOD_ABOVE
        + "The version of {name} installed in the environment ({env}) is below "
        "the supported range ({min}-{max}). " + _REQUEST_MAX,
    ),
    DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_BELOW_MAX: Outcome(
        InstallTarget.MAX,
        _MOD_ABOVE
        + "The version of {name} installed in the environment ({env}) is below "
        "the maximum supported version ({max}). " + _REQUEST_MAX,
    ),
    DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_AT_MAX: Outcome(
        InstallTarget.NONE,
        _MOD_ABOVE
        + "The version of {name} installed in the environment ({env}) is the "
        "maximum supported version ({max}). " + _NO_REQUEST,
    ),
    DiagnosticCode.MANIFEST_TOO_LOW_AND_NO_ENV: Outcome(
        InstallTarget.MIN,
        _MOD_BELOW + "No version of {name} installed. " + _REQUEST_MIN,
    ),
    DiagnosticCode.MANIFEST_TOO_LOW_AND_ENV_UNSUPPORTED: Outcome(
        InstallTarget.MIN,
        _MOD_BELOW
        + "The version of {name} installed in the environment ({env}) is outside "
        "of the supported range ({min}-{max}). " + _REQUEST_MIN,
    ),
    DiagnosticCode.MANIFEST_TOO_LOW_AND_ENV_SUPPORTED: Outcome(
        InstallTarget.NONE, _ENV_HIGH_ENOUGH + _NO_REQUEST
    ),
    DiagnosticCode.MANIFEST_SUPPORTED_AND_NO_ENV: Outcome(
        InstallTarget.MANIFEST,
        "No version of {name} installed. Requesting the version of {name} found "
        "in the `{manifest}` file ({mod}).",
    ),
    DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_UNSUPPORTED: Outcome(
        InstallTarget.MANIFEST,
        "The version of {name} installed in the environment ({env}) is outside "
        "of the supported range ({min}-{max}). " + _REQUEST_MOD,
    ),
    DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_LOWER: Outcome(
        InstallTarget.MANIFEST,
        "The version of {name} installed in the environment ({env}) is lower "
        "than the version found in the `{manifest}` file ({mod}). " + _REQUEST_MOD,
    ),
    DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_HIGHER_OR_EQUAL: Outcome(
        InstallTarget.NONE, _ENV_HIGH_ENOUGH + _NO_REQUEST
    ),
}


def _manifest_too_high_env_supported(
    info: VersionInfo, supported: SupportedRange
) -> DiagnosticCode:
    # Patch level counts here: 1.21.0 installed with max 1.21 is at max.
    if compare_versions(supported.max_version, info.environment_version) > 0:
        return DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_BELOW_MAX
    return DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_AT_MAX


def _manifest_supported_env_supported(
    info: VersionInfo, supported: SupportedRange
) -> DiagnosticCode:
    if compare_versions(info.manifest_version, info.environment_version) > 0:
        return DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_LOWER
    return DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_HIGHER_OR_EQUAL


Cell = Union[DiagnosticCode, Callable[[VersionInfo, SupportedRange], DiagnosticCode]]

_ABSENT = VersionState.ABSENT
_BELOW = VersionState.BELOW_RANGE
_IN = VersionState.IN_RANGE
_ABOVE = VersionState.ABOVE_RANGE

# Keyed by (manifest state, environment state).
DECISION_TABLE: Dict[Tuple[VersionState, VersionState], Cell] = {
    (_ABSENT, _ABSENT): DiagnosticCode.NO_MANIFEST_AND_NO_ENV,
    (_ABSENT, _BELOW): DiagnosticCode.NO_MANIFEST_AND_ENV_BELOW_RANGE,
    (_ABSENT, _ABOVE): DiagnosticCode.NO_MANIFEST_AND_ENV_ABOVE_RANGE,
    (_ABSENT, _IN): DiagnosticCode.NO_MANIFEST_AND_ENV_SUPPORTED,
    (_ABOVE, _ABSENT): DiagnosticCode.MANIFEST_TOO_HIGH_AND_NO_ENV,
    (_ABOVE, _ABOVE): DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_TOO_HIGH,
    (_ABOVE, _BELOW): DiagnosticCode.MANIFEST_TOO_HIGH_AND_ENV_TOO_LOW,
    (_ABOVE, _IN): _manifest_too_high_env_supported,
    (_BELOW, _ABSENT): DiagnosticCode.MANIFEST_TOO_LOW_AND_NO_ENV,
    (_BELOW, _BELOW): DiagnosticCode.MANIFEST_TOO_LOW_AND_ENV_UNSUPPORTED,
    (_BELOW, _ABOVE): DiagnosticCode.MANIFEST_TOO_LOW_AND_ENV_UNSUPPORTED,
    (_BELOW, _IN): DiagnosticCode.MANIFEST_TOO_LOW_AND_ENV_SUPPORTED,
    (_IN, _ABSENT): DiagnosticCode.MANIFEST_SUPPORTED_AND_NO_ENV,
    (_IN, _BELOW): DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_UNSUPPORTED,
    (_IN, _ABOVE): DiagnosticCode.MANIFEST_SUPPORTED_AND_ENV_UNSUPPORTED,
    (_IN, _IN): _manifest_supported_env_supported,
}


def classify(found: bool, version: str, supported: SupportedRange) -> VersionState:
    """
    Classify a (possibly missing) version against the supported range.

    A found version that cannot be parsed sorts below every valid version,
    so it is classified as below the range.
    """
    if not found:
        return VersionState.ABSENT
    if not is_valid_version(version):
        logger.debug(f"Unparsable version {version!r} treated as below range")
        return VersionState.BELOW_RANGE
    if supported.above(version):
        return VersionState.ABOVE_RANGE
    if supported.below(version):
        return VersionState.BELOW_RANGE
    return VersionState.IN_RANGE


class EnvironmentAdvisor:
    """
    Recommend a toolchain version to install for a workspace.

    Args:
        supported_range: Versions that may be recommended
        toolchain: Toolchain naming used in messages
        sink: Receives the message and code of every decision

    Example:
        >>> advisor = EnvironmentAdvisor()
        >>> advisor.decide(VersionInfo()).version_to_install
        '1.21'
    """

    def __init__(
        self,
        supported_range: SupportedRange = DEFAULT_SUPPORTED_RANGE,
        toolchain: ToolchainSpec = DEFAULT_TOOLCHAIN,
        sink: Optional[DiagnosticsSink] = None,
    ):
        self.supported_range = supported_range
        self.toolchain = toolchain
        self.sink = sink or NullDiagnosticsSink()

    def resolve_code(self, info: VersionInfo) -> DiagnosticCode:
        """Look up the decision branch for ``info`` without emitting anything."""
        supported = self.supported_range
        key = (
            classify(info.manifest_version_found, info.manifest_version, supported),
            classify(
                info.environment_version_found, info.environment_version, supported
            ),
        )
        cell = DECISION_TABLE[key]
        if isinstance(cell, DiagnosticCode):
            return cell
        return cell(info, supported)

    def decide(self, info: VersionInfo) -> Recommendation:
        """
        Decide which version to install, emitting one diagnostic.

        Args:
            info: Manifest and environment versions

        Returns:
            Recommendation whose ``version_to_install`` is empty or inside
            the supported range
        """
        code = self.resolve_code(info)
        outcome = OUTCOMES[code]

        message = outcome.template.format(
            name=self.toolchain.name,
            manifest=self.toolchain.manifest,
            mod=info.manifest_version,
            env=info.environment_version,
            min=self.supported_range.min_version,
            max=self.supported_range.max_version,
        )
        version = self._target_version(outcome.target, info)

        logger.debug(f"Decision {code.value} for {info}")
        self.sink.emit(message, code)

        return Recommendation(
            message=message, version_to_install=version, diagnostic_code=code
        )

    def _target_version(self, target: InstallTarget, info: VersionInfo) -> str:
        if target is InstallTarget.MAX:
            return self.supported_range.max_version
        if target is InstallTarget.MIN:
            return self.supported_range.min_version
        if target is InstallTarget.MANIFEST:
            return info.manifest_version
        return ""


def decide(
    info: VersionInfo,
    supported_range: SupportedRange = DEFAULT_SUPPORTED_RANGE,
    toolchain: ToolchainSpec = DEFAULT_TOOLCHAIN,
    sink: Optional[DiagnosticsSink] = None,
) -> Recommendation:
    """Convenience wrapper around :meth:`EnvironmentAdvisor.decide`."""
    return EnvironmentAdvisor(supported_range, toolchain, sink).decide(info)


__all__ = [
    "DECISION_TABLE",
    "OUTCOMES",
    "EnvironmentAdvisor",
    "InstallTarget",
    "Outcome",
    "VersionState",
    "classify",
    "decide",
]
