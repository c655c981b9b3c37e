"""Data types shared by the environment decision, diagnostics and reporting."""

from dataclasses import dataclass

from toolchainenv.environment.diagnostics import DiagnosticCode


@dataclass(frozen=True)
class ToolchainSpec:
    """
    Naming of the toolchain the recommendation is about.

    Attributes:
        name: Display name used in messages (e.g., "Go")
        key: Key of the JSON object written to stdout (e.g., "go")
        manifest: Manifest file name used in messages (e.g., "go.mod")
    """

    name: str = "Go"
    key: str = "go"
    manifest: str = "go.mod"


DEFAULT_TOOLCHAIN = ToolchainSpec()


@dataclass(frozen=True)
class VersionInfo:
    """
    Versions collected from the workspace and the environment.

    The version strings are only meaningful when the matching ``*_found``
    flag is set.
    """

    manifest_version: str = ""
    manifest_version_found: bool = False
    environment_version: str = ""
    environment_version_found: bool = False

    def __str__(self) -> str:
        return (
            f"manifest version: {self.manifest_version}, "
            f"manifest directive found: {self.manifest_version_found}, "
            f"environment version: {self.environment_version}, "
            f"installation found: {self.environment_version_found}"
        )


@dataclass(frozen=True)
class Recommendation:
    """
    Outcome of the environment decision.

    Attributes:
        message: Human-readable justification
        version_to_install: Version to install, empty string for no action
        diagnostic_code: Code identifying the decision branch
    """

    message: str
    version_to_install: str
    diagnostic_code: DiagnosticCode

    @property
    def requires_install(self) -> bool:
        return self.version_to_install != ""


__all__ = ["DEFAULT_TOOLCHAIN", "Recommendation", "ToolchainSpec", "VersionInfo"]
