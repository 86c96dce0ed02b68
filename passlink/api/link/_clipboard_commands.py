"""Clipboard read commands per platform, tried in order."""

import platform
import shutil


def _clipboard_commands() -> list[list[str]]:
    """Return the clipboard read commands available on this machine."""
    system = platform.system().lower()
    if system == "darwin":
        candidates = [["pbpaste"]]
    elif system == "windows":
        candidates = [["powershell", "-NoProfile", "-Command", "Get-Clipboard"]]
    else:
        candidates = [
            ["wl-paste", "--no-newline"],
            ["xclip", "-selection", "clipboard", "-o"],
            ["xsel", "--clipboard", "--output"],
        ]
    return [cmd for cmd in candidates if shutil.which(cmd[0])]
