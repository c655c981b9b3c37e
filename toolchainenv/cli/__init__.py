"""
ToolchainEnv CLI module.

This module provides the command-line interface for ToolchainEnv.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
