"""Internal, fixed locations of commit templates and hooks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional, Protocol


@dataclass(frozen=True)
class CommitSettings:
    """Where commit templates and hook scripts are stored."""

    templates_base_dir: str
    hooks_dir: str


class CommitSettingsReader(Protocol):
    """Read the internal commit settings."""

    def read(self) -> CommitSettings: ...


class StaticValueCommitSettingsSource:
    """Commit settings derived from the user's home directory."""

    def __init__(self, getenv: Callable[[str], Optional[str]] = os.getenv) -> None:
        self._getenv = getenv

    def read(self) -> CommitSettings:
        """Return the settings below $HOME/.git-team."""
        home_dir = self._getenv("HOME") or ""
        return CommitSettings(
            templates_base_dir=f"{home_dir}/.git-team/commit-templates",
            hooks_dir=f"{home_dir}/.git-team/hooks",
        )