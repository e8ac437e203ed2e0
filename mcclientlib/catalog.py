from __future__ import annotations

from .http import HttpClient
from .meta import (
    INTERMEDIARY_VERSIONS_ENDPOINT,
    LOADER_VERSIONS_ENDPOINT,
    QUILT_META,
    QuiltMeta,
)
from .minecraft import VersionManifest


class VersionCatalog:
    """Read-only metadata helper used by the CLI listings."""

    def __init__(self, http_client: HttpClient | None = None, meta_url: str = QUILT_META) -> None:
        self.http_client = http_client or HttpClient()
        self.meta_url = meta_url

    def list_loader_versions(self, limit: int = 200) -> list[str]:
        meta = QuiltMeta.create(
            self.http_client, [LOADER_VERSIONS_ENDPOINT], base_url=self.meta_url
        )
        return meta.get_endpoint(LOADER_VERSIONS_ENDPOINT)[:limit]

    def list_minecraft_versions(self, stable_only: bool = True, limit: int = 200) -> list[str]:
        """Game versions that have intermediary, in Mojang's newest-first order."""
        meta = QuiltMeta.create(
            self.http_client, [INTERMEDIARY_VERSIONS_ENDPOINT], base_url=self.meta_url
        )
        intermediary = meta.get_endpoint(INTERMEDIARY_VERSIONS_ENDPOINT)
        manifest = VersionManifest.create(self.http_client)
        candidates = manifest.release_ids() if stable_only else list(manifest.versions)
        return [version for version in candidates if version in intermediary][:limit]
