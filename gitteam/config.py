"""The tool's own configuration, stored in the global git configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .gitconfig import GitConfigReader, GitConfigWriter
from .gitconfig_errors import GitConfigError, SectionOrKeyIsInvalidError
from .scopes import ActivationScope, GitConfigScope

_ACTIVATION_SCOPE_KEY = "team.config.activation-scope"


@dataclass(frozen=True)
class Config:
    """Configuration settings."""

    activation_scope: ActivationScope


class ConfigError(Exception):
    """The configuration could not be read."""


class ConfigReader(Protocol):
    """Read the configuration."""

    def read(self) -> Config: ...


class ConfigWriter(Protocol):
    """Write a single configuration property."""

    def set_activation_scope(self, scope: ActivationScope) -> None: ...


class GitConfigConfigSource:
    """Read the configuration from the global git configuration."""

    def __init__(self, reader: GitConfigReader) -> None:
        self._reader = reader

    def read(self) -> Config:
        """Return the configuration, defaulting to global activation when unset."""
        try:
            raw_scope = self._reader.get(GitConfigScope.GLOBAL, _ACTIVATION_SCOPE_KEY)
        except SectionOrKeyIsInvalidError:
            return Config(ActivationScope.GLOBAL)
        except GitConfigError as exc:
            raise ConfigError(f"failed to get {_ACTIVATION_SCOPE_KEY}: {exc}") from exc

        scope = ActivationScope.from_string(raw_scope)
        if scope is ActivationScope.UNKNOWN:
            raise ConfigError(
                f"unknown activation-scope '{raw_scope}' found in config. Did you edit it manually?"
            )
        return Config(scope)


class GitConfigConfigSink:
    """Write the configuration to the global git configuration."""

    def __init__(self, writer: GitConfigWriter) -> None:
        self._writer = writer

    def set_activation_scope(self, scope: ActivationScope) -> None:
        """Store the activation scope setting."""
        self._writer.replace_all(GitConfigScope.GLOBAL, _ACTIVATION_SCOPE_KEY, str(scope))