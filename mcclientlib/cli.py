from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
import traceback

from .catalog import VersionCatalog
from .exceptions import McClientLibError
from .installer import ClientInstaller
from .models import InstallRequest


def _cmd_install_client(args: argparse.Namespace) -> int:
    loader_version = args.loader_version
    if loader_version == "latest":
        loader_version = None
    request = InstallRequest(
        minecraft_version=args.minecraft_version,
        loader_version=loader_version,
        generate_profile=args.generate_profile,
        installation_dir=Path(args.dir).resolve() if args.dir else None,
    )
    installer = ClientInstaller(status_handler=print)
    try:
        result = installer.install(request)
    except McClientLibError as exc:
        print(f"Failed to install client: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1

    payload = {
        "minecraft_version": result.plan.minecraft_version,
        "loader_version": result.plan.loader_version,
        "profile_name": result.profile_name,
        "launch_json": str(result.launch_json_path),
        "profile_registered": result.profile_registered,
    }
    print(json.dumps(payload, indent=2))
    return 0


def _cmd_versions(args: argparse.Namespace) -> int:
    catalog = VersionCatalog()
    try:
        if args.kind == "loader":
            versions = catalog.list_loader_versions(limit=args.limit)
        else:
            versions = catalog.list_minecraft_versions(
                stable_only=not args.snapshots, limit=args.limit
            )
    except McClientLibError as exc:
        print(f"Failed to list versions: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1
    for version in versions:
        print(version)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcclient",
        description="Install Quilt client profiles into the Minecraft launcher.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    install = sub.add_parser("install", help="Install a new instance.")
    install_sub = install.add_subparsers(dest="target", required=True)
    client = install_sub.add_parser("client", help="Install a client profile.")
    client.add_argument(
        "--minecraft-version",
        required=True,
        help="Minecraft version to install for.",
    )
    client.add_argument(
        "--loader-version",
        default="latest",
        help="Loader version (default: latest).",
    )
    client.add_argument(
        "--no-profile",
        dest="generate_profile",
        action="store_false",
        help="Do not add an entry to launcher_profiles.json.",
    )
    client.add_argument(
        "--dir",
        default=None,
        help="Launcher directory (default: the platform's .minecraft).",
    )

    versions = sub.add_parser("versions", help="List published versions.")
    versions.add_argument("kind", choices=("loader", "game"))
    versions.add_argument(
        "--snapshots",
        action="store_true",
        help="Include snapshot game versions.",
    )
    versions.add_argument("--limit", type=int, default=200, help="Maximum entries.")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    if args.command == "install" and args.target == "client":
        return _cmd_install_client(args)
    if args.command == "versions":
        return _cmd_versions(args)
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
