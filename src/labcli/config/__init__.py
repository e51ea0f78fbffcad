"""Config file handling."""

from labcli.config.store import (
    CONFIG_ENV_VAR,
    PreferenceStorage,
    default_config_path,
    load_preferences,
    write_preferences,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "PreferenceStorage",
    "default_config_path",
    "load_preferences",
    "write_preferences",
]
