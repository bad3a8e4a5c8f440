"""Checks on whether co-authoring can be activated in the current place."""

from __future__ import annotations

from typing import Protocol

from .gitconfig import GitConfigReader
from .gitconfig_errors import GitConfigError
from .scopes import GitConfigScope


class ActivationValidator(Protocol):
    """Check activation preconditions."""

    def is_inside_a_git_repository(self) -> bool: ...


class GitConfigActivationValidator:
    """Use git configuration to check activation preconditions."""

    def __init__(self, reader: GitConfigReader) -> None:
        self._reader = reader

    def is_inside_a_git_repository(self) -> bool:
        """Return True if the local git configuration can be read."""
        try:
            self._reader.list(GitConfigScope.LOCAL)
        except GitConfigError:
            return False
        return True