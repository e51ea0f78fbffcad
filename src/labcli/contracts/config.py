"""Preference store contracts."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class PreferenceStore(BaseModel):
    """Persisted user preferences: domain priority and per-domain private tokens.

    ``preferred_domains`` is ordered, earlier entries win ties. ``tokens`` maps a
    domain to its private token. The two collections are independent: a domain may
    carry a token without being preferred and vice versa.
    """

    preferred_domains: list[str] = Field(default_factory=list)
    tokens: dict[str, str] = Field(default_factory=dict)

    @field_validator("preferred_domains", mode="before")
    @classmethod
    def _drop_non_string_domains(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        kept = [item for item in value if isinstance(item, str)]
        if len(kept) != len(value):
            logger.debug("Dropped %d non-string preferred domain(s)", len(value) - len(kept))
        return kept

    @field_validator("tokens", mode="before")
    @classmethod
    def _drop_non_string_tokens(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        kept = {key: token for key, token in value.items() if isinstance(key, str) and isinstance(token, str)}
        if len(kept) != len(value):
            logger.debug("Dropped %d token entries that are not string pairs", len(value) - len(kept))
        return kept

    def add_preferred_domain(self, domain: str) -> None:
        self.preferred_domains.append(domain)

    def token_for(self, domain: str) -> str | None:
        token = self.tokens.get(domain)
        if not token:
            return None
        return token

    def add_token(self, domain: str, token: str) -> None:
        if self.token_for(domain) is not None:
            return
        self.tokens[domain] = token


class PreferenceWriter(Protocol):
    def write(self, store: PreferenceStore) -> None:
        """Persist ``store`` in full.

        Raises:
            PersistenceError: If the store cannot be written.
        """
        ...
