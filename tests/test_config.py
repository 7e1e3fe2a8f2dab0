"""
Tests for configuration loading — defaults, YAML overrides and errors.
"""

import textwrap
from pathlib import Path

import pytest

from rnsetup.core.config.loader import (
    CONFIG_FILE,
    SetupConfig,
    find_config_file,
    load_config,
)
from rnsetup.core.errors import ConfigError


class TestDefaults:
    def test_stock_toolchain(self):
        cfg = SetupConfig()
        assert cfg.vcs_tool == "git"
        assert cfg.runtime_tool == "node"
        assert cfg.cli_package == "react-native-cli"
        assert cfg.ide_url == "https://developer.android.com/studio"
        assert cfg.macos.jdk_package == "adoptopenjdk/openjdk/adoptopenjdk11"
        assert cfg.macos.opener == "open"
        assert cfg.linux.jdk_package == "openjdk-11-jdk"
        assert cfg.linux.extra_packages == ["android-tools-adb", "android-tools-fastboot"]
        assert cfg.linux.opener == "xdg-open"
        assert cfg.windows.jdk_package == "openjdk11"
        assert cfg.windows.opener == "start"

    def test_runtime_bootstrap(self):
        cfg = SetupConfig()
        assert "nvm-sh/nvm/v0.39.0/install.sh | bash" in cfg.runtime.nvm_install
        assert "nvm install --lts" in cfg.runtime.node_install
        assert cfg.runtime.manual_url == "https://nodejs.org/"

    def test_next_steps(self):
        steps = SetupConfig().next_steps
        assert len(steps) == 5
        assert steps[0] == "Configure Android Studio and install Android SDK"
        assert steps[-1] == 'Create your first app: "npx react-native init MyApp"'


class TestFindConfigFile:
    def test_env_var_wins(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("RNSETUP_CONFIG", str(tmp_path / "custom.yml"))
        assert find_config_file(tmp_path) == tmp_path / "custom.yml"

    def test_local_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("RNSETUP_CONFIG", raising=False)
        (tmp_path / CONFIG_FILE).write_text("cli_package: x\n")
        assert find_config_file(tmp_path) == tmp_path / CONFIG_FILE

    def test_none(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("RNSETUP_CONFIG", raising=False)
        assert find_config_file(tmp_path) is None


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("RNSETUP_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        assert load_config() == SetupConfig()

    def test_overrides(self, tmp_path: Path):
        path = tmp_path / "rnsetup.yml"
        path.write_text(textwrap.dedent("""\
            cli_package: "@react-native-community/cli"
            linux:
              jdk_package: openjdk-17-jdk
              extra_packages: []
            ide_url: https://mirror.example/studio
        """))
        cfg = load_config(path)
        assert cfg.cli_package == "@react-native-community/cli"
        assert cfg.linux.jdk_package == "openjdk-17-jdk"
        assert cfg.linux.extra_packages == []
        assert cfg.linux.opener == "xdg-open"
        assert cfg.ide_url == "https://mirror.example/studio"
        assert cfg.macos.jdk_package == "adoptopenjdk/openjdk/adoptopenjdk11"

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "rnsetup.yml"
        path.write_text("")
        assert load_config(path) == SetupConfig()

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "rnsetup.yml"
        path.write_text("linux: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "rnsetup.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "rnsetup.yml"
        path.write_text("linux:\n  jdk: openjdk-17-jdk\n")
        with pytest.raises(ConfigError, match="Invalid setup configuration"):
            load_config(path)
