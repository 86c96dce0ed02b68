"""Get passlink home directory path or path under it."""

import os
from pathlib import Path

HOME_DIR_NAME = ".passlink"


def get_home_dir(*parts: str) -> Path:
    """Get passlink home directory path or path under it.

    Checks PASSLINK_HOME first, defaults to ~/.passlink if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.passlink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.passlink/config.json")
    """
    home_env = os.environ.get("PASSLINK_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / HOME_DIR_NAME
    return home / Path(*parts) if parts else home
