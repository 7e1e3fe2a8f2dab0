"""
Executor base — the contract between the installer and the shell.

The installer only talks to executors through this interface, never
directly to ``subprocess``. Tests substitute ``MockExecutor`` to drive
every branch without touching real package managers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rnsetup.core.models.action import Command, Receipt


class CommandExecutor(ABC):
    """Abstract base class for command executors.

    Executors run commands and return receipts.
    They NEVER raise exceptions; failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The executor identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def run(self, command: Command) -> Receipt:
        """Run the command and return a receipt.

        MUST never raise exceptions. All failures are captured
        in the Receipt with status='failed'.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
