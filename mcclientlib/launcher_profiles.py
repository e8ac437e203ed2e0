from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any
import json
import logging

from .launch_json import LOADER_ARTIFACT_NAME
from .utils import replace_text

LAUNCHER_PROFILES_FILE = "launcher_profiles.json"
PROFILE_ICON = "Furnace"

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def profile_key(minecraft_version: str) -> str:
    return f"{LOADER_ARTIFACT_NAME}-{minecraft_version}"


def update_profiles(installation_dir: Path, profile_name: str, minecraft_version: str) -> Path:
    """Point the launcher profile for this game version at ``profile_name``.

    The vanilla launcher owns ``launcher_profiles.json``; if it is missing the
    launcher has never been run here and FileNotFoundError is raised. Unknown
    keys in the document are kept as they are.
    """
    path = Path(installation_dir) / LAUNCHER_PROFILES_FILE
    document: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(document, dict):
        raise ValueError(f"{path} does not contain a json object.")

    profiles = document.setdefault("profiles", {})
    if not isinstance(profiles, dict):
        raise ValueError(f"{path} has an invalid 'profiles' entry.")

    key = profile_key(minecraft_version)
    now = _timestamp()
    existing = profiles.get(key)
    if isinstance(existing, dict):
        existing["lastVersionId"] = profile_name
        existing["lastUsed"] = now
        logger.debug("Updated launcher profile %s -> %s", key, profile_name)
    else:
        profiles[key] = {
            "name": key,
            "type": "custom",
            "created": now,
            "lastUsed": now,
            "icon": PROFILE_ICON,
            "lastVersionId": profile_name,
        }
        logger.debug("Created launcher profile %s -> %s", key, profile_name)

    replace_text(path, json.dumps(document, indent=2))
    return path
