"""
Shared fixtures: a URL-keyed metadata fake and a launcher directory.
"""

import threading

import pytest

from mcclientlib.launch_json import launch_json_url
from mcclientlib.meta import QUILT_META
from mcclientlib.minecraft import MOJANG_MANIFEST_URL

LAUNCH_JSON = (
    '{"id": "quilt-loader-0.17.0-1.19.2", "inheritsFrom": "1.19.2", '
    '"mainClass": "org.quiltmc.loader.impl.launch.knot.KnotClient"}'
)


class _FakeHttp:
    """Stand-in for HttpClient. Exception values are raised instead of returned."""

    def __init__(self, json_map, text_map, barrier_urls=()):
        self.json_map = json_map
        self.text_map = text_map
        self.barrier_urls = set(barrier_urls)
        self.barrier = threading.Barrier(len(self.barrier_urls) or 1, timeout=5)
        self.requested = []
        self._lock = threading.Lock()

    def _lookup(self, mapping, url):
        with self._lock:
            self.requested.append(url)
        if url in self.barrier_urls:
            self.barrier.wait()
        value = mapping[url]
        if isinstance(value, Exception):
            raise value
        return value

    def get_json(self, url):
        return self._lookup(self.json_map, url)

    def get_text(self, url):
        return self._lookup(self.text_map, url)


def _make_http(
    game_versions=("1.19.2", "1.19.1"),
    intermediary=("1.19.2", "1.19.1"),
    loader_versions=("0.17.0", "0.16.9"),
    meta_url=QUILT_META,
    launch_json=LAUNCH_JSON,
    barrier_urls=(),
):
    json_map = {
        MOJANG_MANIFEST_URL: {
            "latest": {"release": game_versions[0] if game_versions else None},
            "versions": [{"id": v, "type": "release"} for v in game_versions],
        },
        f"{meta_url}/versions/loader": [
            {"version": v, "build": i} for i, v in enumerate(loader_versions)
        ],
        f"{meta_url}/versions/intermediary": [
            {"version": v, "maven": f"net.fabricmc:intermediary:{v}"} for v in intermediary
        ],
    }
    text_map = {
        launch_json_url(game, loader, base_url=meta_url): launch_json
        for game in game_versions
        for loader in loader_versions
    }
    return _FakeHttp(json_map=json_map, text_map=text_map, barrier_urls=barrier_urls)


@pytest.fixture
def make_http():
    """Return a factory for metadata fakes; keyword arguments override the catalog."""
    return _make_http


@pytest.fixture
def launcher_dir(tmp_path):
    (tmp_path / "launcher_profiles.json").write_text(
        '{"profiles": {"vanilla": {"name": "Latest release", "type": "latest-release"}}, '
        '"settings": {"locale": "en-us"}, "version": 3}',
        encoding="utf-8",
    )
    return tmp_path
