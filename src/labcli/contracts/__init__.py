"""Shared contracts: models, protocols and exceptions."""

from labcli.contracts.config import PreferenceStore, PreferenceWriter
from labcli.contracts.exceptions import (
    ConfigError,
    CredentialInputError,
    LabError,
    PersistenceError,
    ProjectURLError,
    PromptError,
    RemoteSelectionError,
)
from labcli.contracts.prompt import UserPrompt
from labcli.contracts.remote import RemoteInfo

__all__ = [
    "ConfigError",
    "CredentialInputError",
    "LabError",
    "PersistenceError",
    "PreferenceStore",
    "PreferenceWriter",
    "ProjectURLError",
    "PromptError",
    "RemoteInfo",
    "RemoteSelectionError",
    "UserPrompt",
]
