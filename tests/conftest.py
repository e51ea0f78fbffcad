"""Shared test fixtures for labcli tests."""

from __future__ import annotations

import pytest

from labcli.contracts.config import PreferenceStore
from tests.fakes.storage import RecordingStorage


@pytest.fixture
def prefs() -> PreferenceStore:
    """An empty preference store."""
    return PreferenceStore()


@pytest.fixture
def storage() -> RecordingStorage:
    """Storage fake that records every write."""
    return RecordingStorage()
