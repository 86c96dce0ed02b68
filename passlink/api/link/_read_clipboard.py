"""Read text from the system clipboard."""

import subprocess

from ...utils.get_logger import get_logger
from ._clipboard_commands import _clipboard_commands

logger = get_logger("link.clipboard")


def _read_clipboard(timeout: float = 2.0) -> str | None:
    """Return trimmed clipboard text, or None when empty or unreadable.

    Access errors are treated the same as an empty clipboard.
    """
    for cmd in _clipboard_commands():
        try:
            completed = subprocess.run(cmd, check=True, capture_output=True, text=True, timeout=timeout)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Clipboard read via %s failed: %s", cmd[0], e)
            continue
        text = completed.stdout.strip()
        if text:
            return text
    return None
