from __future__ import annotations

import json
import urllib.parse

from .exceptions import DownloadError
from .http import HttpClient
from .meta import QUILT_META

LOADER_ARTIFACT_NAME = "quilt-loader"


def launch_json_url(
    minecraft_version: str, loader_version: str, base_url: str = QUILT_META
) -> str:
    game = urllib.parse.quote(minecraft_version, safe="")
    loader = urllib.parse.quote(loader_version, safe="")
    return f"{base_url}/versions/loader/{game}/{loader}/profile/json"


def get_launch_json(
    http_client: HttpClient,
    minecraft_version: str,
    loader_version: str,
    base_url: str = QUILT_META,
) -> str:
    """Return the launcher version json for a game and loader pair.

    The text is returned as served so the launcher sees the exact document
    meta produced. It must still parse as a json object.
    """
    url = launch_json_url(minecraft_version, loader_version, base_url=base_url)
    text = http_client.get_text(url)
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DownloadError(f"Invalid launch json from {url}") from exc
    if not isinstance(document, dict):
        raise DownloadError(f"Launch json from {url} is not an object.")
    return text
