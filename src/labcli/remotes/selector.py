"""Choosing one GitLab remote when a repository has several."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from labcli.contracts.config import PreferenceStore, PreferenceWriter
from labcli.contracts.exceptions import PromptError, RemoteSelectionError
from labcli.contracts.prompt import UserPrompt
from labcli.contracts.remote import RemoteInfo

logger = logging.getLogger(__name__)


def preferred_remote(candidates: Sequence[RemoteInfo], preferred_domains: Sequence[str]) -> RemoteInfo | None:
    """Return the candidate matching the highest-priority preferred domain."""
    for domain in preferred_domains:
        for remote in candidates:
            if remote.domain == domain:
                return remote
    return None


class RemoteSelector:
    """Picks the remote to operate on, asking the user only when preferences cannot decide.

    An interactive choice is appended to ``PreferenceStore.preferred_domains`` and
    written through ``storage`` so the next run resolves without a prompt.
    """

    def __init__(self, *, prompt: UserPrompt, storage: PreferenceWriter) -> None:
        self._prompt = prompt
        self._storage = storage

    def select(self, candidates: Sequence[RemoteInfo], prefs: PreferenceStore) -> RemoteInfo | None:
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        remote = preferred_remote(candidates, prefs.preferred_domains)
        if remote is not None:
            logger.debug("Using preferred domain %s", remote.domain)
            return remote

        remote = self._ask(candidates)
        prefs.add_preferred_domain(remote.domain)
        self._storage.write(prefs)
        logger.debug("Recorded %s as preferred domain", remote.domain)
        return remote

    def _ask(self, candidates: Sequence[RemoteInfo]) -> RemoteInfo:
        self._prompt.message("That repository has multiple GitLab remotes.")
        for index, remote in enumerate(candidates, start=1):
            self._prompt.message(f"{index}) {remote.domain}")
        try:
            answer = self._prompt.ask("Please choose target domain:")
        except PromptError as exc:
            raise RemoteSelectionError(f"Failed to read target domain choice: {exc}") from exc

        digits = answer.strip()
        if not (digits.isascii() and digits.isdigit()):
            raise RemoteSelectionError(f"Choice is not a number: {answer!r}", answer=answer)
        choice = int(digits)
        if choice < 1 or choice > len(candidates):
            raise RemoteSelectionError(
                f"Choice out of range (1-{len(candidates)}): {answer!r}",
                answer=answer,
            )
        return candidates[choice - 1]


def select_remote(
    candidates: Sequence[RemoteInfo],
    prefs: PreferenceStore,
    *,
    prompt: UserPrompt,
    storage: PreferenceWriter,
) -> RemoteInfo | None:
    return RemoteSelector(prompt=prompt, storage=storage).select(candidates, prefs)
