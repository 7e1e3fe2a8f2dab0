"""Executors — shell bindings for the installer.

Public re-exports for convenient access.
"""

from rnsetup.adapters.base import CommandExecutor
from rnsetup.adapters.mock import MockExecutor
from rnsetup.adapters.shell.command import ShellCommandExecutor

__all__ = [
    "CommandExecutor",
    "MockExecutor",
    "ShellCommandExecutor",
]
