"""
Identify the toolchain version to install for a workspace.

Collects the manifest and environment versions, decides, and writes the
environment JSON for the build pipeline.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

from toolchainenv.config.parser import ToolchainEnvConfig
from toolchainenv.environment.decision import EnvironmentAdvisor
from toolchainenv.environment.diagnostics import (
    DiagnosticsSink,
    JsonFileDiagnosticsSink,
    LoggingDiagnosticsSink,
)
from toolchainenv.environment.models import Recommendation, VersionInfo
from toolchainenv.environment.reporter import report
from toolchainenv.toolchain.probe import GoEnvironmentProbe
from toolchainenv.workspace.scanner import GoWorkspaceScanner

logger = logging.getLogger(__name__)


def create_sink(config: ToolchainEnvConfig) -> DiagnosticsSink:
    """Create the diagnostics sink configured for this run."""
    if config.diagnostics.directory:
        return JsonFileDiagnosticsSink(
            Path(config.diagnostics.directory), source_prefix=config.toolchain.key
        )
    return LoggingDiagnosticsSink()


def collect_version_info(
    scanner: GoWorkspaceScanner, probe: GoEnvironmentProbe
) -> VersionInfo:
    """Query the workspace scanner and the environment probe once each."""
    manifest = scanner.required_version()
    environment = probe.detect()

    return VersionInfo(
        manifest_version=manifest.version,
        manifest_version_found=manifest.found,
        environment_version=environment.version,
        environment_version_found=environment.found,
    )


def identify_environment(
    project_root: Path,
    config: Optional[ToolchainEnvConfig] = None,
    scanner: Optional[GoWorkspaceScanner] = None,
    probe: Optional[GoEnvironmentProbe] = None,
    sink: Optional[DiagnosticsSink] = None,
    stream: Optional[TextIO] = None,
) -> Recommendation:
    """
    Decide which toolchain version to install and report it.

    Args:
        project_root: Workspace to scan
        config: Configuration (defaults if None)
        scanner: Workspace scanner (scans ``project_root`` if None)
        probe: Environment probe (uses the configured executable if None)
        sink: Diagnostics sink (from configuration if None)
        stream: Output stream for the environment JSON (stdout if None)

    Returns:
        The recommendation that was reported
    """
    config = config or ToolchainEnvConfig()
    scanner = scanner or GoWorkspaceScanner(project_root)
    probe = probe or GoEnvironmentProbe(config.toolchain.executable)
    sink = sink or create_sink(config)

    info = collect_version_info(scanner, probe)
    logger.debug(str(info))

    advisor = EnvironmentAdvisor(
        supported_range=config.supported_range,
        toolchain=config.toolchain.spec(),
        sink=sink,
    )
    recommendation = advisor.decide(info)
    # A logging sink already printed the message with its code.
    if not isinstance(sink, LoggingDiagnosticsSink):
        logger.info(recommendation.message)

    report(recommendation.version_to_install, stream=stream, key=config.toolchain.key)
    return recommendation


__all__ = ["collect_version_info", "create_sink", "identify_environment"]
