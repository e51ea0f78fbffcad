"""Public API surface for labcli."""

__version__ = "0.1.0"

from labcli.api import create_api_client
from labcli.auth import TokenResolver, resolve_token
from labcli.config import PreferenceStorage, default_config_path, load_preferences, write_preferences
from labcli.contracts import (
    ConfigError,
    CredentialInputError,
    LabError,
    PersistenceError,
    PreferenceStore,
    PreferenceWriter,
    ProjectURLError,
    PromptError,
    RemoteInfo,
    RemoteSelectionError,
    UserPrompt,
)
from labcli.remotes import RemoteSelector, collect_remotes, filter_supported_remotes, select_remote
from labcli.resolution import ResolvedTarget, TargetResolver, resolve_target
from labcli.targets import parse_project_path

__all__ = [
    "ConfigError",
    "CredentialInputError",
    "LabError",
    "PersistenceError",
    "PreferenceStorage",
    "PreferenceStore",
    "PreferenceWriter",
    "ProjectURLError",
    "PromptError",
    "RemoteInfo",
    "RemoteSelectionError",
    "RemoteSelector",
    "ResolvedTarget",
    "TargetResolver",
    "TokenResolver",
    "UserPrompt",
    "__version__",
    "collect_remotes",
    "create_api_client",
    "default_config_path",
    "filter_supported_remotes",
    "load_preferences",
    "parse_project_path",
    "resolve_target",
    "resolve_token",
    "select_remote",
    "write_preferences",
]
