"""
Identify-environment command.

Prints the toolchain version to install for the current workspace as JSON.
"""

import logging
from pathlib import Path

from toolchainenv.config.parser import load_config
from toolchainenv.environment.identify import identify_environment

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Execute identify-environment command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success). A failed stdout write is logged and does
        not change the exit code.

    Raises:
        ConfigError: If the configuration file is invalid
    """
    project_root = Path(args.project_root).resolve()
    config = load_config(project_root, getattr(args, "config", None))

    diagnostic_dir = getattr(args, "diagnostic_dir", None)
    if diagnostic_dir:
        config.diagnostics.directory = str(diagnostic_dir)

    logger.debug(f"Identifying environment for {project_root}")
    identify_environment(project_root, config)
    return 0
