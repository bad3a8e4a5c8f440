"""The status command: report whether co-authoring is enabled and with whom."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from termcolor import colored

from .activation import ActivationValidator
from .config import ConfigError, ConfigReader
from .effects import Effect, exit_err_msg, exit_ok, exit_ok_msg
from .gitconfig_errors import GitConfigError
from .scopes import ActivationScope
from .state import State, StateError, StateReader


@dataclass(frozen=True)
class StateRetrievalSucceeded:
    """The current state was retrieved."""

    state: State


@dataclass(frozen=True)
class StateRetrievalFailed:
    """The current state could not be retrieved."""

    reason: Exception


@dataclass
class StatusPolicy:
    """Look up the current state in the configured activation scope."""

    config_reader: ConfigReader
    state_reader: StateReader
    activation_validator: ActivationValidator

    def apply(self) -> StateRetrievalSucceeded | StateRetrievalFailed:
        """Return an event describing the current state or why it is unknown."""
        try:
            cfg = self.config_reader.read()
        except (ConfigError, GitConfigError) as exc:
            return StateRetrievalFailed(ConfigError(f"failed to read config: {exc}"))

        scope = cfg.activation_scope
        if (
            scope is ActivationScope.REPO_LOCAL
            and not self.activation_validator.is_inside_a_git_repository()
        ):
            return StateRetrievalFailed(
                RuntimeError(
                    f"failed to get status with activation-scope={scope}: "
                    "not inside a git repository"
                )
            )

        try:
            state = self.state_reader.query(scope)
        except (StateError, GitConfigError) as exc:
            return StateRetrievalFailed(StateError(f"failed to query current state: {exc}"))

        return StateRetrievalSucceeded(state)


def _render(state: State) -> str:
    text = colored(f"git-team {state.status}", "cyan")
    if state.is_enabled() and state.coauthors:
        text += "\n\n" + colored("co-authors", "blue", attrs=["bold"])
        text += "".join(colored(f"\n─ {coauthor}", "white") for coauthor in sorted(state.coauthors))
    return text


def map_event_to_effect(event: Any) -> Effect:
    """Convert a status event into the effect the command line runs."""
    if isinstance(event, StateRetrievalSucceeded):
        return exit_ok_msg(_render(event.state))
    if isinstance(event, StateRetrievalFailed):
        return exit_err_msg(event.reason)
    return exit_ok()