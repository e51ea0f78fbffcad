"""Project-path command handler."""

from __future__ import annotations

import argparse

from labcli.targets.project_url import parse_project_path


def run_project_path(args: argparse.Namespace) -> str:
    path = parse_project_path(args.url)
    print(path)
    return path


__all__ = ["run_project_path"]
