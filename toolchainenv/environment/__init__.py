"""
Toolchain environment decision for ToolchainEnv.

This module provides functionality for:
- Classifying manifest and installed versions against the supported range
- Deciding which toolchain version to install
- Emitting one diagnostic per decision
- Writing the environment JSON consumed by build pipelines

The orchestration entry point lives in :mod:`toolchainenv.environment.identify`.
"""

from toolchainenv.environment.diagnostics import (
    DiagnosticCode,
    DiagnosticsSink,
    JsonFileDiagnosticsSink,
    LoggingDiagnosticsSink,
    NullDiagnosticsSink,
    RecordingDiagnosticsSink,
)
from toolchainenv.environment.models import (
    DEFAULT_TOOLCHAIN,
    Recommendation,
    ToolchainSpec,
    VersionInfo,
)
from toolchainenv.environment.decision import (
    DECISION_TABLE,
    EnvironmentAdvisor,
    VersionState,
    classify,
    decide,
)
from toolchainenv.environment.reporter import environment_json, report

__all__ = [
    "DiagnosticCode",
    "DiagnosticsSink",
    "JsonFileDiagnosticsSink",
    "LoggingDiagnosticsSink",
    "NullDiagnosticsSink",
    "RecordingDiagnosticsSink",
    "DEFAULT_TOOLCHAIN",
    "Recommendation",
    "ToolchainSpec",
    "VersionInfo",
    "DECISION_TABLE",
    "EnvironmentAdvisor",
    "VersionState",
    "classify",
    "decide",
    "environment_json",
    "report",
]
