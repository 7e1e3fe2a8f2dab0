"""
Shell command executor — run installer commands through the system shell.

Install commands inherit the terminal so package managers can show
progress and ask for passwords. Existence probes (``quiet`` commands)
run with their streams discarded.
"""

from __future__ import annotations

import logging
import subprocess
import time

from rnsetup.adapters.base import CommandExecutor
from rnsetup.core.models.action import Command, Receipt, _now_iso

logger = logging.getLogger(__name__)


class ShellCommandExecutor(CommandExecutor):
    """Execute shell commands through ``subprocess.run(shell=True)``.

    Args:
        dry_run: Log and skip every non-quiet command. Quiet probes
            are read-only and still run.
        timeout: Optional timeout in seconds; None waits forever.
    """

    def __init__(self, dry_run: bool = False, timeout: int | None = None):
        self._dry_run = dry_run
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "shell"

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def run(self, command: Command) -> Receipt:
        if self._dry_run and not command.quiet:
            logger.info("[dry-run] %s", command.command)
            return Receipt.skip(command, reason=f"[dry-run] would run: {command.command}")

        logger.debug("Executing: %s", command.command)
        stream = subprocess.DEVNULL if command.quiet else None
        started_at = _now_iso()
        start = time.monotonic()

        try:
            result = subprocess.run(
                command.command,
                shell=True,
                stdin=stream,
                stdout=stream,
                stderr=stream,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %ss: %s", self._timeout, command.command)
            return Receipt.failure(
                command,
                error=f"Command timed out after {self._timeout}s",
                started_at=started_at,
                metadata={"timeout": self._timeout},
            )
        except Exception as e:
            logger.exception("Command execution error: %s", command.command)
            return Receipt.failure(
                command, error=f"Command execution error: {e}", started_at=started_at
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)

        if result.returncode == 0:
            return Receipt.success(
                command,
                started_at=started_at,
                duration_ms=elapsed_ms,
                return_code=result.returncode,
            )

        if not command.quiet:
            logger.warning(
                "Command exited with code %d: %s", result.returncode, command.command
            )
        return Receipt.failure(
            command,
            error=f"Command exited with code {result.returncode}",
            started_at=started_at,
            duration_ms=elapsed_ms,
            return_code=result.returncode,
        )
