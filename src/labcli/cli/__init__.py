"""Command-line interface for labcli."""

from labcli.cli.app import main
from labcli.cli.parser import build_parser
from labcli.cli.prompt import QuestionaryPrompt

__all__ = ["QuestionaryPrompt", "build_parser", "main"]
