from __future__ import annotations

import pytest

from labcli.auth.resolver import TokenResolver, resolve_token
from labcli.contracts.config import PreferenceStore
from labcli.contracts.exceptions import CredentialInputError, PersistenceError
from tests.fakes.prompt import ScriptedPrompt
from tests.fakes.storage import RecordingStorage


def test_resolve_returns_stored_token_without_prompt_or_write(storage: RecordingStorage) -> None:
    prefs = PreferenceStore(tokens={"gitlab.com": "glpat-stored"})
    prompt = ScriptedPrompt()

    token = TokenResolver(prompt=prompt, storage=storage).resolve("gitlab.com", prefs)

    assert token == "glpat-stored"
    assert prompt.asked == 0
    assert storage.writes == 0


def test_resolve_prompts_stores_and_writes_missing_token(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    prompt = ScriptedPrompt(["  glpat-new  "])

    token = TokenResolver(prompt=prompt, storage=storage).resolve("gitlab.example.com", prefs)

    assert token == "glpat-new"
    assert prompt.secret_questions == ["Please input GitLab private token for gitlab.example.com:"]
    assert prefs.tokens == {"gitlab.example.com": "glpat-new"}
    assert storage.writes == 1
    assert storage.snapshots[0].tokens == {"gitlab.example.com": "glpat-new"}


def test_resolve_treats_empty_stored_token_as_missing(storage: RecordingStorage) -> None:
    prefs = PreferenceStore(tokens={"gitlab.com": ""})

    token = resolve_token("gitlab.com", prefs, prompt=ScriptedPrompt(["glpat-1"]), storage=storage)

    assert token == "glpat-1"
    assert prefs.tokens["gitlab.com"] == "glpat-1"


def test_resolve_is_idempotent(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    resolver = TokenResolver(prompt=ScriptedPrompt(["glpat-once"]), storage=storage)

    first = resolver.resolve("gitlab.com", prefs)
    second = resolver.resolve("gitlab.com", prefs)

    assert first == second == "glpat-once"
    assert storage.writes == 1


def test_resolve_does_not_require_domain_to_be_preferred(storage: RecordingStorage) -> None:
    prefs = PreferenceStore(preferred_domains=["gitlab.other.com"], tokens={"gitlab.com": "tok"})

    assert resolve_token("gitlab.com", prefs, prompt=ScriptedPrompt(), storage=storage) == "tok"


def test_resolve_raises_when_prompt_fails(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    resolver = TokenResolver(prompt=ScriptedPrompt(fail=True), storage=storage)

    with pytest.raises(CredentialInputError, match="Failed to read private token for gitlab.com"):
        resolver.resolve("gitlab.com", prefs)

    assert prefs.tokens == {}
    assert storage.writes == 0


def test_resolve_rejects_blank_token(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    resolver = TokenResolver(prompt=ScriptedPrompt(["   "]), storage=storage)

    with pytest.raises(CredentialInputError, match="empty"):
        resolver.resolve("gitlab.com", prefs)

    assert prefs.tokens == {}


def test_resolve_propagates_persistence_failure(prefs: PreferenceStore) -> None:
    resolver = TokenResolver(prompt=ScriptedPrompt(["glpat-x"]), storage=RecordingStorage(fail=True))

    with pytest.raises(PersistenceError):
        resolver.resolve("gitlab.com", prefs)
