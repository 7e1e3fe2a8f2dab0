"""
Tests for domain models — Command, Receipt and Platform.
"""

import pytest

from rnsetup.core.models import Command, Platform, Receipt


class TestReceipt:
    def _command(self) -> Command:
        return Command(id="cli-install", command="npm install -g react-native-cli")

    def test_success(self):
        r = Receipt.success(self._command(), output="done", return_code=0)
        assert r.ok
        assert not r.failed
        assert r.command_id == "cli-install"
        assert r.command == "npm install -g react-native-cli"
        assert r.output == "done"

    def test_failure(self):
        r = Receipt.failure(self._command(), error="boom", return_code=2)
        assert r.failed
        assert not r.ok
        assert r.error == "boom"
        assert r.return_code == 2

    def test_skip(self):
        r = Receipt.skip(self._command(), reason="[dry-run]")
        assert r.status == "skipped"
        assert not r.ok
        assert not r.failed
        assert r.output == "[dry-run]"

    def test_timestamps_populated(self):
        r = Receipt.success(self._command())
        assert r.started_at
        assert r.ended_at


class TestCommand:
    def test_defaults(self):
        c = Command(id="x", command="echo hi")
        assert c.quiet is False
        assert c.name == ""


class TestPlatform:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("darwin", Platform.MACOS),
            ("linux", Platform.LINUX),
            ("linux2", Platform.UNSUPPORTED),
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.UNSUPPORTED),
            ("freebsd13", Platform.UNSUPPORTED),
            ("aix", Platform.UNSUPPORTED),
            ("", Platform.UNSUPPORTED),
        ],
    )
    def test_from_identifier(self, identifier, expected):
        assert Platform.from_identifier(identifier) is expected

    def test_defaults_to_host(self, monkeypatch):
        monkeypatch.setattr("sys.platform", "darwin")
        assert Platform.from_identifier() is Platform.MACOS

    def test_labels(self):
        assert Platform.MACOS.label == "macOS"
        assert Platform.UNSUPPORTED.label == "Unsupported"
