"""Private token resolution."""

from __future__ import annotations

import logging

from labcli.contracts.config import PreferenceStore, PreferenceWriter
from labcli.contracts.exceptions import CredentialInputError, PromptError
from labcli.contracts.prompt import UserPrompt

logger = logging.getLogger(__name__)


class TokenResolver:
    """Returns the stored token for a domain, asking for and saving one on first use."""

    def __init__(self, *, prompt: UserPrompt, storage: PreferenceWriter) -> None:
        self._prompt = prompt
        self._storage = storage

    def resolve(self, domain: str, prefs: PreferenceStore) -> str:
        token = prefs.token_for(domain)
        if token is not None:
            logger.debug("Using stored token for %s", domain)
            return token

        try:
            entered = self._prompt.ask_secret(f"Please input GitLab private token for {domain}:")
        except PromptError as exc:
            raise CredentialInputError(f"Failed to read private token for {domain}: {exc}") from exc
        token = entered.strip()
        if not token:
            raise CredentialInputError(f"Private token for {domain} is empty")

        prefs.add_token(domain, token)
        self._storage.write(prefs)
        logger.debug("Stored new token for %s", domain)
        return token


def resolve_token(
    domain: str,
    prefs: PreferenceStore,
    *,
    prompt: UserPrompt,
    storage: PreferenceWriter,
) -> str:
    return TokenResolver(prompt=prompt, storage=storage).resolve(domain, prefs)
