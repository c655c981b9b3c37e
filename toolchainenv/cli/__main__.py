"""
Entry point for running ToolchainEnv CLI as a module.

Usage: python -m toolchainenv.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
