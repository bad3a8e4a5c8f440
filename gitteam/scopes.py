"""Scopes for activation of the tool and for git configuration access."""

from __future__ import annotations

from enum import Enum


class GitConfigScope(Enum):
    """The git configuration file to operate on."""

    GLOBAL = "global"
    LOCAL = "local"

    def __str__(self) -> str:
        return self.value

    def flag(self) -> str:
        """Return the command line flag selecting this scope."""
        return f"--{self.value}"


class ActivationScope(Enum):
    """Where co-authoring is enabled and disabled."""

    GLOBAL = "global"
    REPO_LOCAL = "repo-local"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, candidate: str) -> ActivationScope:
        """Parse a scope name; anything unrecognised becomes UNKNOWN."""
        try:
            return cls(candidate)
        except ValueError:
            return cls.UNKNOWN

    def to_gitconfig_scope(self) -> GitConfigScope:
        """Map this activation scope to the git configuration scope it uses."""
        if self is ActivationScope.GLOBAL:
            return GitConfigScope.GLOBAL
        return GitConfigScope.LOCAL