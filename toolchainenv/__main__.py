"""
Entry point for running ToolchainEnv CLI as a module.

Usage: python -m toolchainenv [command] [options]
"""

from toolchainenv.cli.parser import main

if __name__ == "__main__":
    main()
