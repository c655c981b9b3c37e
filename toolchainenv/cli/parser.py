"""
ToolchainEnv CLI argument parser.

This module implements the command-line interface for ToolchainEnv using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from toolchainenv.core.exceptions import ToolchainEnvError

# Get version from package
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("toolchainenv")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """ToolchainEnv command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="tkenv",
            description="ToolchainEnv - pick the toolchain version a build needs",
            epilog='Use "tkenv COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"ToolchainEnv {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./toolchainenv.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project root directory (default: current directory)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_identify_environment_command(subparsers)
        self._add_decide_command(subparsers)

        return parser

    def _add_identify_environment_command(self, subparsers):
        """Add 'identify-environment' subcommand."""
        parser = subparsers.add_parser(
            "identify-environment",
            help="Print the toolchain version to install as JSON",
            description=(
                "Scan the workspace and the environment, then print the "
                "toolchain version to install as JSON on stdout"
            ),
        )
        parser.add_argument(
            "--diagnostic-dir",
            type=Path,
            metavar="PATH",
            help="Write JSON diagnostics to this directory (overrides config)",
        )

    def _add_decide_command(self, subparsers):
        """Add 'decide' subcommand."""
        parser = subparsers.add_parser(
            "decide",
            help="Decide for given versions without scanning",
            description=(
                "Run the decision for explicit manifest/environment versions "
                "and print the environment JSON"
            ),
        )
        parser.add_argument(
            "--manifest-version",
            metavar="VERSION",
            help="Version declared by the manifest (omit if none)",
        )
        parser.add_argument(
            "--env-version",
            metavar="VERSION",
            help="Version installed in the environment (omit if none)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except ToolchainEnvError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Logs go to stderr; stdout carries the environment JSON only.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stderr,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "identify-environment": "toolchainenv.cli.commands.identify_environment",
            "decide": "toolchainenv.cli.commands.decide",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
