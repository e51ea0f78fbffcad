"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from labcli.cli.commands.project_path import run_project_path
from labcli.cli.commands.target import run_target
from labcli.cli.parser import build_parser
from labcli.contracts.exceptions import (
    ConfigError,
    CredentialInputError,
    PersistenceError,
    ProjectURLError,
    RemoteSelectionError,
)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "project-path":
            run_project_path(args)
            return 0
        if run_target(args) is None:
            print("error: current directory has no GitLab remote", file=sys.stderr)
            return 2
        return 0
    except (ConfigError, ProjectURLError, RemoteSelectionError, CredentialInputError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except PersistenceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
