"""XDG Base Directory specification helpers."""

import os
from pathlib import Path


def get_xdg_config_dir() -> Path:
    """Get XDG config directory for avrflash.

    Returns:
        Path to config directory: $XDG_CONFIG_HOME/avrflash or ~/.config/avrflash
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "avrflash"
    return Path.home() / ".config" / "avrflash"
