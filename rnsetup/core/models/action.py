"""
Command and Receipt models — the execution contract.

Commands represent requested shell invocations. Receipts represent results.
This is the I/O contract between the installer and executors:
the installer sends Commands, executors return Receipts. Never exceptions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

# Command IDs of existence probes start with this
PROBE_PREFIX = "probe-"


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Command(BaseModel):
    """A shell command the installer wants to run.

    ``quiet`` commands run with their standard streams suppressed;
    everything else inherits the terminal so package manager output
    and prompts stay visible to the user.
    """

    id: str                         # stable identifier, e.g. "brew-install-watchman"
    command: str                    # full shell command line
    name: str = ""                  # human-readable name
    quiet: bool = False


class Receipt(BaseModel):
    """Result of running a command.

    Executors NEVER raise exceptions; failures are captured here.
    """

    command_id: str
    command: str = ""
    status: Literal["ok", "skipped", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    return_code: int | None = None
    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @classmethod
    def success(
        cls,
        command: Command,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(
            command_id=command.id,
            command=command.command,
            status="ok",
            output=output,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        command: Command,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            command_id=command.id,
            command=command.command,
            status="failed",
            error=error,
            **kwargs,
        )

    @classmethod
    def skip(
        cls,
        command: Command,
        reason: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a skip receipt."""
        return cls(
            command_id=command.id,
            command=command.command,
            status="skipped",
            output=reason,
            **kwargs,
        )
