"""Terminal implementation of the interactive prompt."""

from __future__ import annotations

import sys
from typing import TextIO

import questionary
from rich.console import Console

from labcli.contracts.exceptions import PromptError


class QuestionaryPrompt:
    """Asks questions on the terminal with questionary; messages go to stderr via Rich."""

    def __init__(self, *, console: Console | None = None, stdin: TextIO | None = None) -> None:
        self._console = console or Console(stderr=True, highlight=False)
        self._stdin = stdin or sys.stdin

    def _require_terminal(self, text: str) -> None:
        if not self._stdin.isatty():
            raise PromptError(f"cannot prompt without an interactive terminal: {text}")

    def ask(self, text: str) -> str:
        self._require_terminal(text)
        answer = questionary.text(text).ask()
        if answer is None:
            raise PromptError("input aborted")
        return str(answer)

    def ask_secret(self, text: str) -> str:
        self._require_terminal(text)
        answer = questionary.password(text).ask()
        if answer is None:
            raise PromptError("input aborted")
        return str(answer)

    def message(self, text: str) -> None:
        self._console.print(text, markup=False)
