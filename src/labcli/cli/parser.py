"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("labcli")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="labcli")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    target_parser = subparsers.add_parser("target", help="Resolve the GitLab domain and token for this directory")
    target_parser.add_argument(
        "--config",
        default=None,
        help="Path to the labcli config file (default: $LABCLI_CONFIG or ~/.config/labcli/config.json)",
    )
    target_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    path_parser = subparsers.add_parser("project-path", help="Print the project path of a GitLab web URL")
    path_parser.add_argument("url", help="GitLab web URL, e.g. an issue or merge request URL")
    path_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
