"""
Configuration loader — reads rnsetup.yml into a SetupConfig.

Every package name, bootstrap script and URL the installer uses lives
in ``SetupConfig``. The defaults install the stock React Native
toolchain; a YAML file can override any field, for example to pin a
different JDK or point the IDE download at a mirror.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rnsetup.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "rnsetup.yml"
ENV_CONFIG = "RNSETUP_CONFIG"

_NVM_VERSION = "v0.39.0"


class RuntimeConfig(BaseModel):
    """How Node.js gets installed when it is missing."""

    model_config = ConfigDict(extra="forbid")

    nvm_install: str = (
        f"curl -o- https://raw.githubusercontent.com/nvm-sh/nvm/{_NVM_VERSION}/install.sh | bash"
    )
    node_install: str = (
        "bash -c 'export NVM_DIR=\"${NVM_DIR:-$HOME/.nvm}\"; "
        ". \"$NVM_DIR/nvm.sh\" && nvm install --lts'"
    )
    manual_url: str = "https://nodejs.org/"


class MacOSConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    homebrew_install: str = (
        '/bin/bash -c "$(curl -fsSL '
        'https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh)"'
    )
    watchman_package: str = "watchman"
    jdk_package: str = "adoptopenjdk/openjdk/adoptopenjdk11"
    opener: str = "open"


class LinuxConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    jdk_package: str = "openjdk-11-jdk"
    extra_packages: list[str] = Field(
        default_factory=lambda: ["android-tools-adb", "android-tools-fastboot"]
    )
    opener: str = "xdg-open"


class WindowsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    chocolatey_install: str = (
        "powershell Set-ExecutionPolicy Bypass -Scope Process -Force; "
        "[System.Net.ServicePointManager]::SecurityProtocol = "
        "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072; "
        "iex ((New-Object System.Net.WebClient).DownloadString("
        "'https://chocolatey.org/install.ps1'))"
    )
    jdk_package: str = "openjdk11"
    opener: str = "start"


class SetupConfig(BaseModel):
    """Everything the installer shells out with.

    Loaded from rnsetup.yml, or built from defaults when no file exists.
    """

    model_config = ConfigDict(extra="forbid")

    vcs_tool: str = "git"
    runtime_tool: str = "node"
    cli_package: str = "react-native-cli"
    ide_name: str = "Android Studio"
    ide_url: str = "https://developer.android.com/studio"

    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    macos: MacOSConfig = Field(default_factory=MacOSConfig)
    linux: LinuxConfig = Field(default_factory=LinuxConfig)
    windows: WindowsConfig = Field(default_factory=WindowsConfig)

    next_steps: list[str] = Field(
        default_factory=lambda: [
            "Configure Android Studio and install Android SDK",
            "Set ANDROID_HOME environment variable",
            "Add platform-tools to PATH",
            'Run "react-native doctor" to verify your installation',
            'Create your first app: "npx react-native init MyApp"',
        ]
    )


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Locate the config file without an explicit path.

    ``RNSETUP_CONFIG`` wins; otherwise ``rnsetup.yml`` in the given
    directory (default: cwd). Returns None when neither exists.
    """
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        return Path(env_path)

    candidate = (start_dir or Path.cwd()) / CONFIG_FILE
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None) -> SetupConfig:
    """Load and validate setup configuration.

    Args:
        path: Explicit path to a YAML config. If None, falls back to
            ``find_config_file()`` and then to built-in defaults.

    Returns:
        Validated SetupConfig.

    Raises:
        ConfigError: If an explicit/located file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found, using built-in defaults", CONFIG_FILE)
        return SetupConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading setup config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = SetupConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid setup configuration in {path}: {e}") from e

    logger.info("Loaded setup config from %s", path)
    return config
