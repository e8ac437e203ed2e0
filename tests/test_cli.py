import json

import pytest

from mcclientlib.cli import build_parser, main


@pytest.fixture
def fake_http(monkeypatch, make_http):
    http = make_http()
    monkeypatch.setattr("mcclientlib.installer.HttpClient", lambda: http)
    monkeypatch.setattr("mcclientlib.catalog.HttpClient", lambda: http)
    return http


def test_parser_defaults():
    args = build_parser().parse_args(["install", "client", "--minecraft-version", "1.19.2"])
    assert args.loader_version == "latest"
    assert args.generate_profile is True
    assert args.dir is None


def test_install_client_success(fake_http, launcher_dir, capsys):
    code = main(
        ["install", "client", "--minecraft-version", "1.19.2", "--dir", str(launcher_dir)]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Completed installation" in out
    payload = json.loads(out[out.index("{"):])
    assert payload["profile_name"] == "quilt-loader-0.17.0-1.19.2"
    assert payload["profile_registered"] is True
    assert (launcher_dir / "versions" / "quilt-loader-0.17.0-1.19.2").is_dir()


def test_install_client_failure_exit_code(fake_http, tmp_path, capsys):
    code = main(
        [
            "install",
            "client",
            "--minecraft-version",
            "9.9.9",
            "--no-profile",
            "--dir",
            str(tmp_path),
        ]
    )
    err = capsys.readouterr().err
    assert code == 1
    assert "Failed to install client: Minecraft version 9.9.9 does not exist." in err
    assert "Traceback" in err


def test_install_client_twice_fails(fake_http, tmp_path, capsys):
    argv = [
        "install",
        "client",
        "--minecraft-version",
        "1.19.2",
        "--loader-version",
        "0.16.9",
        "--no-profile",
        "--dir",
        str(tmp_path),
    ]
    assert main(argv) == 0
    assert main(argv) == 1
    assert "already installed" in capsys.readouterr().err


def test_versions_loader(fake_http, capsys):
    assert main(["versions", "loader"]) == 0
    assert capsys.readouterr().out.split() == ["0.17.0", "0.16.9"]


def test_versions_game(fake_http, capsys):
    assert main(["versions", "game", "--limit", "1"]) == 0
    assert capsys.readouterr().out.split() == ["1.19.2"]
