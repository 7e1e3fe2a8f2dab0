"""
Installer — the React Native environment setup pipeline.

Runs a fixed sequence of stages, each one a handful of shell commands:

    1. prerequisites   git must already be installed
    2. runtime         Node.js, bootstrapped through nvm when missing
    3. CLI tool        npm install -g react-native-cli
    4. platform        exactly one of macOS / Linux / Windows
    5. next steps      static manual follow-ups

Any failed command aborts the pipeline (no retry, no rollback).
Environments the installer cannot fix (no git; no Node.js on Windows)
raise ``SetupAborted`` after telling the user what to do.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Protocol

from rnsetup.adapters.base import CommandExecutor
from rnsetup.core.config.loader import SetupConfig
from rnsetup.core.errors import CommandError, RnSetupError, SetupAborted
from rnsetup.core.models.action import PROBE_PREFIX, Command, Receipt
from rnsetup.core.models.platform import Platform

logger = logging.getLogger(__name__)

AFFIRMATIVE = "y"


class Console(Protocol):
    """What the installer needs from the terminal."""

    def echo(self, message: str = "", **style: object) -> None: ...
    def step(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def question(self, prompt: str) -> str: ...


class Installer:
    """Set up a React Native development environment on this machine.

    Args:
        executor: Runs shell commands (real shell, or a mock in tests).
        console: Tagged output and the interactive prompt.
        config: Package names and URLs; defaults when None.
        platform_id: ``sys.platform`` style identifier. Read once here
            and fixed for the lifetime of the installer.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        console: Console,
        config: SetupConfig | None = None,
        platform_id: str | None = None,
    ):
        self.executor = executor
        self.console = console
        self.config = config or SetupConfig()
        self._platform_id = platform_id if platform_id is not None else sys.platform
        self._platform = Platform.from_identifier(self._platform_id)

    @property
    def platform(self) -> Platform:
        return self._platform

    @property
    def platform_id(self) -> str:
        return self._platform_id

    # ── Pipeline ────────────────────────────────────────────────

    def run(self) -> int:
        """Run every stage in order and return the process exit code."""
        self.console.echo("React Native Environment Setup", fg="cyan")
        self.console.echo("----------------------------")
        self.console.echo(f"Detected platform: {self._platform_id}\n")
        logger.info("Starting setup (platform=%s)", self._platform.label)

        try:
            self.check_prerequisites()
            self.ensure_runtime()
            self.install_cli_tool()
            self.setup_for_platform()
        except SetupAborted as e:
            logger.warning("Setup aborted: %s", e)
            return e.exit_code
        except RnSetupError as e:
            logger.error("Installation failed: %s", e)
            self.console.error(f"Installation failed: {e}")
            return 1

        self.console.success("React Native environment setup completed successfully!")
        self.print_next_steps()
        logger.info("Setup completed")
        return 0

    def command_exists(self, name: str) -> bool:
        """Whether ``<name> --version`` runs successfully.

        Never raises: anything short of a clean exit means "absent".
        """
        probe = Command(
            id=f"{PROBE_PREFIX}{name}",
            name=f"probe {name}",
            command=f"{name} --version",
            quiet=True,
        )
        try:
            receipt = self.executor.run(probe)
        except Exception as e:
            logger.debug("Probe for %s raised: %s", name, e)
            return False

        logger.debug("Probe %s: %s", name, receipt.status)
        return receipt.ok

    def check_prerequisites(self) -> None:
        self.console.step("Checking prerequisites...")

        if not self.command_exists(self.config.vcs_tool):
            self.console.warning(
                "Git is not installed. Please install Git and run this script again."
            )
            raise SetupAborted(f"{self.config.vcs_tool} not found")

        self.console.success("Prerequisites check complete.")

    def ensure_runtime(self) -> None:
        """Install Node.js through nvm if it is missing.

        Windows has no scripted path: the user is pointed at the
        download page and the run stops.
        """
        self.console.step("Checking Node.js installation...")

        if self.command_exists(self.config.runtime_tool):
            self.console.success("Node.js is already installed.")
            return

        self.console.step("Node.js not found. Installing using NVM...")

        runtime = self.config.runtime
        if self._platform is Platform.WINDOWS:
            self.console.warning(f"Please install Node.js from {runtime.manual_url}")
            raise SetupAborted("Node.js must be installed manually on Windows")

        self._execute("nvm-install", runtime.nvm_install, "install nvm")
        self._execute("node-install", runtime.node_install, "install Node.js LTS")

    def install_cli_tool(self) -> None:
        self.console.step("Installing React Native CLI...")
        self._execute(
            "cli-install",
            f"npm install -g {self.config.cli_package}",
            "install React Native CLI",
        )
        self.console.success("React Native CLI installed successfully.")

    def setup_for_platform(self) -> None:
        """Run the procedure for this platform, or warn that there is none."""
        procedures: dict[Platform, Callable[[], None]] = {
            Platform.MACOS: self.setup_macos,
            Platform.LINUX: self.setup_linux,
            Platform.WINDOWS: self.setup_windows,
        }
        procedure = procedures.get(self._platform)
        if procedure is None:
            logger.warning("No platform procedure for %r", self._platform_id)
            self.console.warning(
                f"No platform-specific setup available for '{self._platform_id}'; skipping."
            )
            return
        procedure()

    # ── Platform procedures ─────────────────────────────────────

    def setup_macos(self) -> None:
        cfg = self.config.macos
        self.console.step("Setting up macOS development environment...")

        if not self.command_exists("brew"):
            self.console.step("Installing Homebrew...")
            self._execute("homebrew-install", cfg.homebrew_install, "install Homebrew")

        self.console.step("Installing watchman...")
        self._execute("watchman-install", f"brew install {cfg.watchman_package}")

        # Xcode needs the App Store; we only warn
        if not self.command_exists("xcode-select"):
            self.console.warning(
                "Xcode is not installed. Please install Xcode from the App Store."
            )

        self.console.step("Installing Java Development Kit...")
        self._execute("jdk-install", f"brew install {cfg.jdk_package}")

        self.offer_ide_download(cfg.opener)
        self.console.success("macOS development environment setup complete.")

    def setup_linux(self) -> None:
        cfg = self.config.linux
        self.console.step("Setting up Linux development environment...")

        self.console.step("Installing Java Development Kit...")
        self._execute("apt-update", "sudo apt-get update")
        self._execute("jdk-install", f"sudo apt-get install -y {cfg.jdk_package}")

        if cfg.extra_packages:
            self.console.step("Installing additional dependencies...")
            self._execute(
                "extra-install",
                f"sudo apt-get install -y {' '.join(cfg.extra_packages)}",
            )

        self.offer_ide_download(cfg.opener)
        self.console.success("Linux development environment setup complete.")

    def setup_windows(self) -> None:
        cfg = self.config.windows
        self.console.step("Setting up Windows development environment...")

        if not self.command_exists("choco"):
            self.console.step("Installing Chocolatey...")
            self._execute("chocolatey-install", cfg.chocolatey_install, "install Chocolatey")

        self.console.step("Installing Java Development Kit...")
        self._execute("jdk-install", f"choco install -y {cfg.jdk_package}")

        self.offer_ide_download(cfg.opener)
        self.console.success("Windows development environment setup complete.")

    def offer_ide_download(self, opener: str) -> None:
        """Ask whether to open the IDE download page in a browser.

        Only an answer of "y" (any case) opens it. Nothing checks that
        the user actually finishes the install.
        """
        ide = self.config.ide_name
        answer = self.question(f"Would you like to download {ide}? (y/n): ")
        if answer.lower() != AFFIRMATIVE:
            logger.info("%s download declined (answer=%r)", ide, answer)
            return

        self._execute("ide-open", f"{opener} {self.config.ide_url}", f"open {ide} download page")
        self.console.warning(
            f"Please complete {ide} installation and setup Android SDK manually."
        )

    def question(self, prompt: str) -> str:
        return self.console.question(prompt)

    def print_next_steps(self) -> None:
        self.console.echo("\n📋 Next Steps:")
        for number, line in enumerate(self.config.next_steps, start=1):
            self.console.echo(f"{number}. {line}")

    # ── Helpers ─────────────────────────────────────────────────

    def _execute(self, command_id: str, command_line: str, name: str = "") -> Receipt:
        """Run one command; raise CommandError unless it succeeded or was skipped."""
        command = Command(id=command_id, command=command_line, name=name or command_id)
        logger.info("Running %s: %s", command.name, command.command)

        receipt = self.executor.run(command)
        if receipt.failed:
            raise CommandError(receipt)
        return receipt
