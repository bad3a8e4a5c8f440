"""The persisted co-authoring state: enabled with co-authors, or disabled."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from .gitconfig import GitConfigReader, GitConfigWriter
from .gitconfig_errors import GitConfigError, TryingToUnsetAnOptionWhichDoesNotExistError
from .scopes import ActivationScope

_ACTIVE_COAUTHORS_KEY = "team.state.active-coauthors"
_STATUS_KEY = "team.state.status"


class Status(Enum):
    """Whether co-authoring is switched on."""

    ENABLED = "enabled"
    DISABLED = "disabled"

    def __str__(self) -> str:
        return self.value


@dataclass
class State:
    """The current status together with the active co-authors."""

    status: Status
    coauthors: list[str] = field(default_factory=list)

    @classmethod
    def enabled(cls, coauthors: list[str]) -> State:
        """Build an enabled state with the given co-authors."""
        return cls(Status.ENABLED, list(coauthors))

    @classmethod
    def disabled(cls) -> State:
        """Build a disabled state without co-authors."""
        return cls(Status.DISABLED, [])

    def is_enabled(self) -> bool:
        """Return True if co-authoring is enabled."""
        return self.status is Status.ENABLED


class StateError(Exception):
    """Reading or persisting the state failed."""


class StateReader(Protocol):
    """Retrieve the current state."""

    def query(self, scope: ActivationScope) -> State: ...


class StateWriter(Protocol):
    """Persist the current state."""

    def persist_enabled(self, scope: ActivationScope, coauthors: list[str]) -> None: ...

    def persist_disabled(self, scope: ActivationScope) -> None: ...


class GitConfigStateSink:
    """Persist the state in git configuration."""

    def __init__(self, writer: GitConfigWriter) -> None:
        self._writer = writer

    def persist_enabled(self, scope: ActivationScope, coauthors: list[str]) -> None:
        """Store the state as enabled with the given co-authors."""
        self._persist(scope, State.enabled(coauthors))

    def persist_disabled(self, scope: ActivationScope) -> None:
        """Store the state as disabled."""
        self._persist(scope, State.disabled())

    def _persist(self, activation_scope: ActivationScope, state: State) -> None:
        scope = activation_scope.to_gitconfig_scope()

        try:
            self._writer.unset_all(scope, _ACTIVE_COAUTHORS_KEY)
        except TryingToUnsetAnOptionWhichDoesNotExistError:
            pass
        except GitConfigError as exc:
            raise StateError(f"failed to unset {_ACTIVE_COAUTHORS_KEY}") from exc

        for coauthor in state.coauthors:
            try:
                self._writer.add(scope, _ACTIVE_COAUTHORS_KEY, coauthor)
            except GitConfigError as exc:
                raise StateError(f"failed to set {_ACTIVE_COAUTHORS_KEY}") from exc

        try:
            self._writer.replace_all(scope, _STATUS_KEY, state.status.value)
        except GitConfigError as exc:
            raise StateError(f"failed to replace {_STATUS_KEY}") from exc


class GitConfigStateSource:
    """Read the state from git configuration."""

    def __init__(self, reader: GitConfigReader) -> None:
        self._reader = reader

    def query(self, scope: ActivationScope) -> State:
        """Return the state stored for the given activation scope."""
        gitconfig_scope = scope.to_gitconfig_scope()

        try:
            status = self._reader.get(gitconfig_scope, _STATUS_KEY)
        except GitConfigError:
            return State.disabled()
        if status in ("", Status.DISABLED.value):
            return State.disabled()

        try:
            coauthors = self._reader.get_all(gitconfig_scope, _ACTIVE_COAUTHORS_KEY)
        except GitConfigError as exc:
            raise StateError(f"no active co-authors found: {exc}") from exc

        return State.enabled(coauthors)