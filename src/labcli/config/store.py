"""Preference store loading and persistence."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from labcli.contracts.config import PreferenceStore
from labcli.contracts.exceptions import ConfigError, PersistenceError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LABCLI_CONFIG"
_DEFAULT_CONFIG_PATH = Path("~/.config/labcli/config.json")


def default_config_path() -> Path:
    override = (os.getenv(CONFIG_ENV_VAR) or "").strip()
    if override:
        return Path(override).expanduser()
    return _DEFAULT_CONFIG_PATH.expanduser()


class PreferenceStorage:
    """Reads and overwrites the JSON file backing a :class:`PreferenceStore`."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path).expanduser() if path is not None else default_config_path()

    def load(self) -> PreferenceStore:
        if not self.path.exists():
            logger.debug("No config at %s, starting with empty preferences", self.path)
            return PreferenceStore()
        try:
            payload: Any = json.loads(self.path.read_text(encoding="utf-8"))
            return PreferenceStore.model_validate(payload)
        except OSError as exc:
            raise ConfigError(f"failed reading config file: {self.path}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(f"invalid JSON in config file: {self.path}") from exc
        except ValidationError as exc:
            raise ConfigError(f"invalid config: {exc}") from exc

    def write(self, store: PreferenceStore) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(mode=0o600)
            self.path.chmod(0o600)
            self.path.write_text(store.model_dump_json(indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(
                f"failed to write config file: {self.path}; the choice will not be remembered next time"
            ) from exc
        logger.debug("Wrote preferences to %s", self.path)


def load_preferences(path: str | Path | None = None) -> PreferenceStore:
    return PreferenceStorage(path).load()


def write_preferences(store: PreferenceStore, path: str | Path | None = None) -> None:
    PreferenceStorage(path).write(store)
