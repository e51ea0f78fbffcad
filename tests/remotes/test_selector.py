from __future__ import annotations

import pytest

from labcli.contracts.config import PreferenceStore
from labcli.contracts.exceptions import PersistenceError, RemoteSelectionError
from labcli.remotes.selector import RemoteSelector, preferred_remote, select_remote
from tests.fakes.prompt import ScriptedPrompt
from tests.fakes.remote import make_remote
from tests.fakes.storage import RecordingStorage

A = make_remote("gitlab.a.com", name="a")
B = make_remote("gitlab.b.com", name="b")
C = make_remote("gitlab.c.com", name="c")


def test_select_returns_none_for_no_candidates(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    prompt = ScriptedPrompt()

    assert RemoteSelector(prompt=prompt, storage=storage).select([], prefs) is None
    assert prompt.asked == 0
    assert storage.writes == 0


def test_select_single_candidate_skips_preferences_prompt_and_write(storage: RecordingStorage) -> None:
    prefs = PreferenceStore(preferred_domains=["gitlab.b.com"])
    prompt = ScriptedPrompt()

    selected = RemoteSelector(prompt=prompt, storage=storage).select([A], prefs)

    assert selected == A
    assert prompt.asked == 0
    assert storage.writes == 0
    assert prefs.preferred_domains == ["gitlab.b.com"]


@pytest.mark.parametrize("candidates", [[A, B], [B, A]])
def test_select_uses_preferred_domain_regardless_of_candidate_order(
    candidates: list, storage: RecordingStorage
) -> None:
    prefs = PreferenceStore(preferred_domains=["gitlab.b.com"])
    prompt = ScriptedPrompt()

    selected = RemoteSelector(prompt=prompt, storage=storage).select(candidates, prefs)

    assert selected == B
    assert prompt.asked == 0
    assert storage.writes == 0


def test_preference_order_wins_over_candidate_order() -> None:
    assert preferred_remote([A, B, C], ["gitlab.x.com", "gitlab.c.com", "gitlab.a.com"]) == C


def test_select_prompts_with_numbered_list_and_records_choice(
    prefs: PreferenceStore, storage: RecordingStorage
) -> None:
    prompt = ScriptedPrompt(["2"])

    selected = RemoteSelector(prompt=prompt, storage=storage).select([A, B, C], prefs)

    assert selected == B
    assert prompt.messages[1:] == ["1) gitlab.a.com", "2) gitlab.b.com", "3) gitlab.c.com"]
    assert prompt.questions == ["Please choose target domain:"]
    assert prefs.preferred_domains == ["gitlab.b.com"]
    assert storage.writes == 1
    assert storage.snapshots[0].preferred_domains == ["gitlab.b.com"]


@pytest.mark.parametrize("answer", ["1", "2", " 3 "])
def test_select_accepts_every_valid_index(answer: str, prefs: PreferenceStore, storage: RecordingStorage) -> None:
    candidates = [A, B, C]

    selected = RemoteSelector(prompt=ScriptedPrompt([answer]), storage=storage).select(candidates, prefs)

    assert selected == candidates[int(answer) - 1]
    assert prefs.preferred_domains.count(selected.domain) == 1


@pytest.mark.parametrize("answer", ["0", "3", "two", "", "1.5"])
def test_select_rejects_invalid_answers(answer: str, prefs: PreferenceStore, storage: RecordingStorage) -> None:
    selector = RemoteSelector(prompt=ScriptedPrompt([answer]), storage=storage)

    with pytest.raises(RemoteSelectionError) as exc:
        selector.select([A, B], prefs)

    assert exc.value.answer == answer
    assert repr(answer) in str(exc.value)
    assert prefs.preferred_domains == []
    assert storage.writes == 0


def test_select_wraps_prompt_failure(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    selector = RemoteSelector(prompt=ScriptedPrompt(fail=True), storage=storage)

    with pytest.raises(RemoteSelectionError, match="Failed to read target domain choice"):
        selector.select([A, B], prefs)


def test_select_propagates_persistence_failure_but_keeps_in_memory_choice(prefs: PreferenceStore) -> None:
    selector = RemoteSelector(prompt=ScriptedPrompt(["1"]), storage=RecordingStorage(fail=True))

    with pytest.raises(PersistenceError, match="will not be remembered"):
        selector.select([A, B], prefs)

    assert prefs.preferred_domains == ["gitlab.a.com"]


def test_second_run_reuses_recorded_choice(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    assert select_remote([A, B], prefs, prompt=ScriptedPrompt(["2"]), storage=storage) == B

    prompt = ScriptedPrompt()
    assert select_remote([A, B], prefs, prompt=prompt, storage=storage) == B
    assert prompt.asked == 0
    assert storage.writes == 1


@pytest.mark.parametrize("answer", ["1_0", "２", "+1", "-1", "1e1"])
def test_select_accepts_only_plain_ascii_digits(
    answer: str, prefs: PreferenceStore, storage: RecordingStorage
) -> None:
    candidates = [make_remote(f"gitlab.{index}.com", name=str(index)) for index in range(12)]
    selector = RemoteSelector(prompt=ScriptedPrompt([answer]), storage=storage)

    with pytest.raises(RemoteSelectionError, match="not a number"):
        selector.select(candidates, prefs)

    assert prefs.preferred_domains == []
    assert storage.writes == 0


def test_select_accepts_multi_digit_index(prefs: PreferenceStore, storage: RecordingStorage) -> None:
    candidates = [make_remote(f"gitlab.{index}.com", name=str(index)) for index in range(12)]

    selected = RemoteSelector(prompt=ScriptedPrompt(["10"]), storage=storage).select(candidates, prefs)

    assert selected.domain == "gitlab.9.com"
