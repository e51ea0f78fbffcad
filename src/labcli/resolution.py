"""End-to-end resolution of the GitLab target for a working directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel

from labcli.auth.resolver import TokenResolver
from labcli.contracts.config import PreferenceStore, PreferenceWriter
from labcli.contracts.prompt import UserPrompt
from labcli.contracts.remote import RemoteInfo
from labcli.remotes.filter import filter_supported_remotes
from labcli.remotes.selector import RemoteSelector

logger = logging.getLogger(__name__)


class ResolvedTarget(BaseModel):
    """Domain, private token and remote chosen for the current invocation."""

    domain: str
    token: str
    remote: RemoteInfo

    model_config = {"frozen": True}

    @property
    def api_url(self) -> str:
        return self.remote.api_url()

    @property
    def project_path(self) -> str:
        return self.remote.project_path


class TargetResolver:
    def __init__(self, *, prompt: UserPrompt, storage: PreferenceWriter) -> None:
        self._selector = RemoteSelector(prompt=prompt, storage=storage)
        self._tokens = TokenResolver(prompt=prompt, storage=storage)

    def resolve(self, remotes: Iterable[RemoteInfo], prefs: PreferenceStore) -> ResolvedTarget | None:
        candidates = filter_supported_remotes(remotes)
        logger.debug("Found %d GitLab remote(s)", len(candidates))
        remote = self._selector.select(candidates, prefs)
        if remote is None:
            return None
        token = self._tokens.resolve(remote.domain, prefs)
        return ResolvedTarget(domain=remote.domain, token=token, remote=remote)


def resolve_target(
    remotes: Iterable[RemoteInfo],
    prefs: PreferenceStore,
    *,
    prompt: UserPrompt,
    storage: PreferenceWriter,
) -> ResolvedTarget | None:
    return TargetResolver(prompt=prompt, storage=storage).resolve(remotes, prefs)
