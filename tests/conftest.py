"""
Shared test fixtures and configuration.
"""

import io
from collections.abc import Callable

import pytest

from rnsetup.adapters.mock import MockExecutor
from rnsetup.core.installer import Installer
from rnsetup.ui.cli.console import ConsoleChannel


@pytest.fixture
def executor() -> MockExecutor:
    """A mock executor where every tool exists and every command succeeds."""
    return MockExecutor()


@pytest.fixture
def output() -> io.StringIO:
    """Captures everything the console prints."""
    return io.StringIO()


@pytest.fixture
def make_console(output: io.StringIO) -> Callable[[str], ConsoleChannel]:
    """Build a console whose answers come from ``answers`` (one per line)."""

    def _make(answers: str = "") -> ConsoleChannel:
        return ConsoleChannel(
            input_stream=io.StringIO(answers),
            output_stream=output,
            color=False,
        )

    return _make


@pytest.fixture
def make_installer(
    executor: MockExecutor,
    make_console: Callable[[str], ConsoleChannel],
) -> Callable[..., Installer]:
    """Build an installer for a given platform identifier and canned answers."""

    def _make(platform_id: str = "linux", answers: str = "n\n") -> Installer:
        return Installer(executor, make_console(answers), platform_id=platform_id)

    return _make
