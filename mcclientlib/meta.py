from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Iterable, TypeVar

from .exceptions import DownloadError
from .http import HttpClient

QUILT_META = "https://meta.quiltmc.org/v3"

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Endpoint(Generic[T]):
    """A meta endpoint path and the parser for its payload."""

    path: str
    parse: Callable[[Any], T]


def _parse_loader_versions(payload: Any) -> list[str]:
    if not isinstance(payload, list):
        raise DownloadError("Loader versions endpoint did not return a list.")
    versions: list[str] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        version = entry.get("version")
        if isinstance(version, str) and version:
            versions.append(version)
    return versions


def _parse_intermediary_versions(payload: Any) -> dict[str, str]:
    if not isinstance(payload, list):
        raise DownloadError("Intermediary versions endpoint did not return a list.")
    mapping: dict[str, str] = {}
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        version = entry.get("version")
        if isinstance(version, str) and version:
            mapping[version] = str(entry.get("maven") or "")
    return mapping


# Newest first, exactly as served.
LOADER_VERSIONS_ENDPOINT: Endpoint[list[str]] = Endpoint(
    "/versions/loader", _parse_loader_versions
)
INTERMEDIARY_VERSIONS_ENDPOINT: Endpoint[dict[str, str]] = Endpoint(
    "/versions/intermediary", _parse_intermediary_versions
)


class QuiltMeta:
    """Point-in-time snapshot of a fixed set of meta endpoints."""

    def __init__(self, base_url: str, data: dict[Endpoint[Any], Any]) -> None:
        self.base_url = base_url
        self._data = data

    @classmethod
    def create(
        cls,
        http_client: HttpClient,
        endpoints: Iterable[Endpoint[Any]],
        base_url: str = QUILT_META,
    ) -> QuiltMeta:
        data: dict[Endpoint[Any], Any] = {}
        for endpoint in endpoints:
            payload = http_client.get_json(f"{base_url}{endpoint.path}")
            data[endpoint] = endpoint.parse(payload)
            logger.debug("Fetched meta endpoint %s", endpoint.path)
        return cls(base_url=base_url, data=data)

    def get_endpoint(self, endpoint: Endpoint[T]) -> T:
        if endpoint not in self._data:
            raise KeyError(f"Endpoint {endpoint.path} was not fetched.")
        return self._data[endpoint]
