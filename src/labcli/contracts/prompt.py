"""Interactive prompt contract."""

from __future__ import annotations

from typing import Protocol


class UserPrompt(Protocol):
    def ask(self, text: str) -> str:
        """Ask a question and return the raw answer.

        Raises:
            PromptError: If input cannot be read.
        """
        ...

    def ask_secret(self, text: str) -> str:
        """Ask for a value that must not be echoed."""
        ...

    def message(self, text: str) -> None: ...
