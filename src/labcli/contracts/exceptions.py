"""Exception hierarchy for labcli.

All labcli exceptions inherit from :class:`LabError`, so a command can report any
resolution failure with a single ``except`` clause while still mapping specific
failure modes to distinct exit codes.
"""

from __future__ import annotations


class LabError(Exception):
    """Base exception for all labcli errors."""


class ConfigError(LabError):
    """Configuration file loading or validation failure."""


class PersistenceError(LabError):
    """The preference store could not be written back to disk."""


class PromptError(LabError):
    """Interactive input could not be read."""


class RemoteSelectionError(LabError):
    """Choosing between several GitLab remotes failed.

    Attributes:
        answer: The raw answer that was rejected, if any.
    """

    def __init__(self, message: str, *, answer: str | None = None) -> None:
        super().__init__(message)
        self.answer = answer


class CredentialInputError(LabError):
    """A private token could not be read from the user."""


class ProjectURLError(LabError):
    """A web URL cannot be reduced to a project path."""
