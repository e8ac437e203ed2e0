from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import DownloadError
from .http import HttpClient

MOJANG_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"


@dataclass(slots=True)
class VersionManifest:
    """Mojang's list of every published game version."""

    latest_release: str | None
    latest_snapshot: str | None
    versions: dict[str, Mapping[str, Any]]

    @classmethod
    def create(
        cls, http_client: HttpClient, url: str = MOJANG_MANIFEST_URL
    ) -> VersionManifest:
        data = http_client.get_json(url)
        if not isinstance(data, dict):
            raise DownloadError(f"Version manifest from {url} is not an object.")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VersionManifest:
        latest = data.get("latest") or {}
        versions: dict[str, Mapping[str, Any]] = {}
        for entry in data.get("versions", []):
            if not isinstance(entry, dict):
                continue
            version_id = entry.get("id")
            if isinstance(version_id, str) and version_id:
                versions[version_id] = entry
        return cls(
            latest_release=latest.get("release"),
            latest_snapshot=latest.get("snapshot"),
            versions=versions,
        )

    def get_version(self, version_id: str) -> Mapping[str, Any] | None:
        return self.versions.get(version_id)

    def release_ids(self) -> list[str]:
        return [
            version_id
            for version_id, entry in self.versions.items()
            if entry.get("type") == "release"
        ]
