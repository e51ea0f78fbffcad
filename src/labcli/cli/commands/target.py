"""Target command handlers."""

from __future__ import annotations

import argparse

from labcli.cli.prompt import QuestionaryPrompt
from labcli.config.store import PreferenceStorage
from labcli.contracts.prompt import UserPrompt
from labcli.remotes.catalog import collect_remotes
from labcli.resolution import ResolvedTarget, TargetResolver


def mask_token(token: str) -> str:
    if len(token) <= 4:
        return "*" * len(token)
    return f"{token[:4]}{'*' * (len(token) - 4)}"


def format_target_summary(target: ResolvedTarget) -> str:
    lines = [
        "",
        "labcli - target resolved",
        "",
        f"  Remote:    {target.remote.name}",
        f"  Domain:    {target.domain}",
        f"  Project:   {target.project_path}",
        f"  API:       {target.api_url}",
        f"  Token:     {mask_token(target.token)}",
        "",
    ]
    return "\n".join(lines)


def run_target(args: argparse.Namespace, *, prompt: UserPrompt | None = None) -> ResolvedTarget | None:
    storage = PreferenceStorage(args.config)
    prefs = storage.load()
    resolver = TargetResolver(prompt=prompt or QuestionaryPrompt(), storage=storage)
    target = resolver.resolve(collect_remotes(), prefs)
    if target is not None:
        print(format_target_summary(target))
    return target


__all__ = ["format_target_summary", "mask_token", "run_target"]
