from __future__ import annotations

from pathlib import Path
import os
import sys


def default_installation_dir() -> Path:
    """Return the vanilla launcher's game directory for this platform."""
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / ".minecraft"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "minecraft"
    return Path.home() / ".minecraft"
