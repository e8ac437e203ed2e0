import json

import pytest

from mcclientlib.launcher_profiles import profile_key, update_profiles


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_update_profiles_adds_entry_and_keeps_other_keys(launcher_dir):
    path = update_profiles(launcher_dir, "quilt-loader-0.17.0-1.19.2", "1.19.2")

    document = _read(path)
    entry = document["profiles"]["quilt-loader-1.19.2"]
    assert entry["name"] == "quilt-loader-1.19.2"
    assert entry["type"] == "custom"
    assert entry["lastVersionId"] == "quilt-loader-0.17.0-1.19.2"
    assert entry["created"] == entry["lastUsed"]
    assert document["profiles"]["vanilla"]["type"] == "latest-release"
    assert document["settings"] == {"locale": "en-us"}
    assert document["version"] == 3


def test_update_profiles_repoints_existing_entry(launcher_dir):
    update_profiles(launcher_dir, "quilt-loader-0.16.9-1.19.2", "1.19.2")
    path = launcher_dir / "launcher_profiles.json"
    document = _read(path)
    document["profiles"]["quilt-loader-1.19.2"]["javaArgs"] = "-Xmx4G"
    path.write_text(json.dumps(document), encoding="utf-8")

    update_profiles(launcher_dir, "quilt-loader-0.17.0-1.19.2", "1.19.2")

    entry = _read(path)["profiles"]["quilt-loader-1.19.2"]
    assert entry["lastVersionId"] == "quilt-loader-0.17.0-1.19.2"
    assert entry["javaArgs"] == "-Xmx4G"


def test_update_profiles_creates_profiles_section(tmp_path):
    (tmp_path / "launcher_profiles.json").write_text("{}", encoding="utf-8")
    update_profiles(tmp_path, "quilt-loader-0.17.0-1.19.2", "1.19.2")
    assert "quilt-loader-1.19.2" in _read(tmp_path / "launcher_profiles.json")["profiles"]


def test_update_profiles_requires_launcher_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        update_profiles(tmp_path, "quilt-loader-0.17.0-1.19.2", "1.19.2")


def test_update_profiles_rejects_non_object(tmp_path):
    (tmp_path / "launcher_profiles.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        update_profiles(tmp_path, "quilt-loader-0.17.0-1.19.2", "1.19.2")


def test_profile_key():
    assert profile_key("1.20.1") == "quilt-loader-1.20.1"
