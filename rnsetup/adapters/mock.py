"""
Mock executor — universal test double for command execution.

Used in mock mode and in tests to drive the installer without
touching real package managers. Returns success for everything
unless told otherwise per command ID or per missing tool.
"""

from __future__ import annotations

from rnsetup.adapters.base import CommandExecutor
from rnsetup.core.models.action import PROBE_PREFIX, Command, Receipt


class MockExecutor(CommandExecutor):
    """Universal mock executor for testing.

    By default every command succeeds and every tool is "installed".
    Tools listed as missing make their existence probe fail.
    """

    def __init__(
        self,
        executor_name: str = "mock",
        missing: tuple[str, ...] | list[str] = (),
        default_output: str = "[mock] executed",
    ):
        self._name = executor_name
        self._default_output = default_output
        self._missing: set[str] = set(missing)
        self._failures: dict[str, str] = {}
        self._responses: dict[str, Receipt] = {}
        self._call_log: list[Command] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[Command]:
        """All commands this mock has received, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def executed_ids(self) -> list[str]:
        """IDs of every non-probe command received, in order."""
        return [c.id for c in self._call_log if not c.id.startswith(PROBE_PREFIX)]

    @property
    def probed_tools(self) -> list[str]:
        """Tools whose existence was probed, in order."""
        return [
            c.id[len(PROBE_PREFIX):] for c in self._call_log
            if c.id.startswith(PROBE_PREFIX)
        ]

    def set_missing(self, *tools: str) -> None:
        """Make the existence probe for each tool fail."""
        self._missing.update(tools)

    def set_response(self, command_id: str, receipt: Receipt) -> None:
        """Set a custom response for a specific command ID."""
        self._responses[command_id] = receipt

    def set_failure(self, command_id: str, error: str = "Mock failure") -> None:
        """Configure a specific command to fail."""
        self._failures[command_id] = error

    def run(self, command: Command) -> Receipt:
        self._call_log.append(command)

        if command.id in self._responses:
            return self._responses[command.id]

        if command.id in self._failures:
            return Receipt.failure(command, error=self._failures[command.id], return_code=1)

        if command.id.startswith(PROBE_PREFIX):
            tool = command.id[len(PROBE_PREFIX):]
            if tool in self._missing:
                return Receipt.failure(
                    command,
                    error=f"{tool}: command not found",
                    return_code=127,
                )

        return Receipt.success(
            command,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log, configured failures and missing tools."""
        self._call_log.clear()
        self._failures.clear()
        self._responses.clear()
        self._missing.clear()
