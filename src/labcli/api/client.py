"""Authenticated GitLab API client bootstrap."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import httpx

from labcli.resolution import ResolvedTarget


def _user_agent() -> str:
    try:
        return f"labcli/{version('labcli')}"
    except PackageNotFoundError:
        return "labcli"


def gitlab_headers(token: str) -> dict[str, str]:
    return {
        "PRIVATE-TOKEN": token,
        "Accept": "application/json",
        "User-Agent": _user_agent(),
    }


def create_api_client(target: ResolvedTarget, *, timeout: float = 10.0) -> httpx.Client:
    """Build a client for ``target``'s API. No request is sent until the caller uses it."""
    return httpx.Client(
        base_url=target.api_url,
        headers=gitlab_headers(target.token),
        timeout=timeout,
    )
