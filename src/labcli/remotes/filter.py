"""Supported-domain filtering."""

from __future__ import annotations

from collections.abc import Iterable

from labcli.contracts.remote import RemoteInfo

SUPPORTED_DOMAIN_PREFIX = "gitlab"


def is_supported_domain(domain: str) -> bool:
    return domain.startswith(SUPPORTED_DOMAIN_PREFIX)


def filter_supported_remotes(remotes: Iterable[RemoteInfo]) -> list[RemoteInfo]:
    return [remote for remote in remotes if is_supported_domain(remote.domain)]
