"""Unit tests for clipboard reading and reference resolution."""

import importlib
import subprocess

import pytest

pytestmark = pytest.mark.link

read_mod = importlib.import_module("passlink.api.link._read_clipboard")
commands_mod = importlib.import_module("passlink.api.link._clipboard_commands")
resolve_mod = importlib.import_module("passlink.api.link._resolve_reference")


def _completed(cmd, stdout):
    return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr="")


class TestClipboardCommands:
    def test_darwin_uses_pbpaste(self, monkeypatch):
        monkeypatch.setattr(commands_mod.platform, "system", lambda: "Darwin")
        monkeypatch.setattr(commands_mod.shutil, "which", lambda name: f"/usr/bin/{name}")
        assert commands_mod._clipboard_commands() == [["pbpaste"]]

    def test_linux_filters_missing_tools(self, monkeypatch):
        monkeypatch.setattr(commands_mod.platform, "system", lambda: "Linux")
        monkeypatch.setattr(commands_mod.shutil, "which", lambda name: "/usr/bin/xsel" if name == "xsel" else None)
        assert commands_mod._clipboard_commands() == [["xsel", "--clipboard", "--output"]]

    def test_no_tools_available(self, monkeypatch):
        monkeypatch.setattr(commands_mod.platform, "system", lambda: "Linux")
        monkeypatch.setattr(commands_mod.shutil, "which", lambda name: None)
        assert commands_mod._clipboard_commands() == []


class TestReadClipboard:
    def test_returns_trimmed_text(self, monkeypatch):
        monkeypatch.setattr(read_mod, "_clipboard_commands", lambda: [["fake"]])
        monkeypatch.setattr(read_mod.subprocess, "run", lambda cmd, **kwargs: _completed(cmd, "  John 3:16\n"))
        assert read_mod._read_clipboard() == "John 3:16"

    def test_empty_clipboard(self, monkeypatch):
        monkeypatch.setattr(read_mod, "_clipboard_commands", lambda: [["fake"]])
        monkeypatch.setattr(read_mod.subprocess, "run", lambda cmd, **kwargs: _completed(cmd, "   \n"))
        assert read_mod._read_clipboard() is None

    def test_errors_are_treated_as_empty(self, monkeypatch):
        def boom(cmd, **kwargs):
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(read_mod, "_clipboard_commands", lambda: [["fake"]])
        monkeypatch.setattr(read_mod.subprocess, "run", boom)
        assert read_mod._read_clipboard() is None

    def test_falls_through_to_next_tool(self, monkeypatch):
        def run(cmd, **kwargs):
            if cmd[0] == "broken":
                raise subprocess.CalledProcessError(1, cmd)
            if cmd[0] == "slow":
                raise subprocess.TimeoutExpired(cmd, 2.0)
            return _completed(cmd, "Romans 8:28")

        monkeypatch.setattr(read_mod, "_clipboard_commands", lambda: [["broken"], ["slow"], ["works"]])
        monkeypatch.setattr(read_mod.subprocess, "run", run)
        assert read_mod._read_clipboard() == "Romans 8:28"

    def test_no_commands(self, monkeypatch):
        monkeypatch.setattr(read_mod, "_clipboard_commands", lambda: [])
        assert read_mod._read_clipboard() is None


class TestResolveReference:
    def test_explicit_reference_wins(self, monkeypatch):
        monkeypatch.setattr(resolve_mod, "_read_clipboard", lambda: pytest.fail("clipboard read"))
        assert resolve_mod._resolve_reference("  John 3:16 ", True) == "John 3:16"

    def test_blank_reference_uses_clipboard(self, monkeypatch):
        monkeypatch.setattr(resolve_mod, "_read_clipboard", lambda: "Psalm 23")
        assert resolve_mod._resolve_reference("   ", True) == "Psalm 23"
        assert resolve_mod._resolve_reference(None, True) == "Psalm 23"

    def test_clipboard_disabled(self, monkeypatch):
        monkeypatch.setattr(resolve_mod, "_read_clipboard", lambda: pytest.fail("clipboard read"))
        assert resolve_mod._resolve_reference(None, False) is None
