"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("hoarder-sync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hoarder-sync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Run one sync pass")
    sync_parser.add_argument("--config", default="./hoarder-sync.json", help="Path to hoarder-sync.json")
    sync_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    watch_parser = subparsers.add_parser("watch", help="Sync periodically and push local note edits")
    watch_parser.add_argument("--config", default="./hoarder-sync.json", help="Path to hoarder-sync.json")
    watch_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    init_parser = subparsers.add_parser("init", help="Generate a hoarder-sync.json config file")
    init_parser.add_argument(
        "--output",
        "-o",
        default="hoarder-sync.json",
        help="Output file path (default: hoarder-sync.json)",
    )
    init_parser.add_argument("--vault", default=".", help="Vault directory written as vault_path")
    init_parser.add_argument("--api-endpoint", default=None, help="Karakeep API endpoint ending in /api/v1")

    return parser


__all__ = ["build_parser"]
