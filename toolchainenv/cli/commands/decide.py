"""
Decide command.

Runs the environment decision for versions given on the command line,
without scanning the workspace or probing the environment.
"""

import logging
from pathlib import Path

from toolchainenv.config.parser import load_config
from toolchainenv.core.exceptions import InvalidVersionError
from toolchainenv.core.versions import is_valid_version
from toolchainenv.environment.decision import EnvironmentAdvisor
from toolchainenv.environment.diagnostics import LoggingDiagnosticsSink
from toolchainenv.environment.models import VersionInfo
from toolchainenv.environment.reporter import report

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Execute decide command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        InvalidVersionError: If a given version cannot be parsed
    """
    config = load_config(Path(args.project_root), getattr(args, "config", None))

    for value in (args.manifest_version, args.env_version):
        if value is not None and not is_valid_version(value):
            raise InvalidVersionError(value)

    info = VersionInfo(
        manifest_version=args.manifest_version or "",
        manifest_version_found=args.manifest_version is not None,
        environment_version=args.env_version or "",
        environment_version_found=args.env_version is not None,
    )

    advisor = EnvironmentAdvisor(
        supported_range=config.supported_range,
        toolchain=config.toolchain.spec(),
        sink=LoggingDiagnosticsSink(),
    )
    recommendation = advisor.decide(info)

    report(recommendation.version_to_install, key=config.toolchain.key)
    return 0
