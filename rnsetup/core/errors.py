"""
Installer exceptions.

Executors never raise; the installer turns failed receipts into
``CommandError`` so a stage failure unwinds the whole pipeline.
"""

from __future__ import annotations

from rnsetup.core.models.action import Receipt


class RnSetupError(Exception):
    """Base class for all rn-setup errors."""


class ConfigError(RnSetupError):
    """Raised when the setup configuration is invalid or missing."""


class CommandError(RnSetupError):
    """An external command did not succeed."""

    def __init__(self, receipt: Receipt):
        self.receipt = receipt
        detail = receipt.error or f"exit code {receipt.return_code}"
        super().__init__(f"Command failed: {receipt.command}: {detail}")


class SetupAborted(RnSetupError):
    """Hard exit for an environment the installer cannot remediate.

    The user has already been told what to do; callers report nothing
    further and exit with ``exit_code``.
    """

    def __init__(self, reason: str, exit_code: int = 1):
        self.exit_code = exit_code
        super().__init__(reason)
