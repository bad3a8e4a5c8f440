"""Reading and writing git configuration through the git command."""

from __future__ import annotations

import re
import subprocess
from typing import Callable, Protocol

from .gitconfig_errors import classify
from .scopes import GitConfigScope


class GitConfigReader(Protocol):
    """Read git configuration settings."""

    def get(self, scope: GitConfigScope, key: str) -> str: ...

    def get_all(self, scope: GitConfigScope, key: str) -> list[str]: ...

    def get_regexp(self, scope: GitConfigScope, pattern: str) -> dict[str, str]: ...

    def list(self, scope: GitConfigScope) -> dict[str, str]: ...


class GitConfigWriter(Protocol):
    """Modify git configuration settings."""

    def add(self, scope: GitConfigScope, key: str, value: str) -> None: ...

    def replace_all(self, scope: GitConfigScope, key: str, value: str) -> None: ...

    def unset_all(self, scope: GitConfigScope, key: str) -> None: ...


def run_git_config(*args: str) -> str:
    """Run `git config` with the given arguments and return its combined output.

    Raises the matching GitConfigError when git exits with a failure status.
    """
    try:
        completed = subprocess.run(
            ["/usr/bin/env", "git", "config", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise classify(str(exc)) from exc
    if completed.returncode != 0:
        raise classify(f"exit status {completed.returncode}")
    return completed.stdout.decode("utf-8", errors="replace")


def _split_pairs(lines: list[str], separator: str) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for line in lines:
        parts = re.split(separator, line, maxsplit=1)
        mapping[parts[0]] = parts[1] if len(parts) > 1 else ""
    return mapping


class GitConfig:
    """Git configuration access backed by a `git config` runner."""

    def __init__(self, runner: Callable[..., str] = run_git_config) -> None:
        self._runner = runner

    def execute(self, scope: GitConfigScope, *args: str) -> list[str]:
        """Run git config in the given scope and return its output lines."""
        output = self._runner(scope.flag(), *args)
        if not output:
            return []
        return output.rstrip("\n").split("\n")

    def get(self, scope: GitConfigScope, key: str) -> str:
        """Return the first value of a key, or an empty string."""
        lines = self.execute(scope, "--get", key)
        return lines[0] if lines else ""

    def get_all(self, scope: GitConfigScope, key: str) -> list[str]:
        """Return all values of a key."""
        return self.execute(scope, "--get-all", key)

    def get_regexp(self, scope: GitConfigScope, pattern: str) -> dict[str, str]:
        """Return all keys matching a pattern, mapped to their values."""
        return _split_pairs(self.execute(scope, "--get-regexp", pattern), r"\s")

    def list(self, scope: GitConfigScope) -> dict[str, str]:
        """Return the entire configuration of a scope."""
        return _split_pairs(self.execute(scope, "--list"), "=")

    def add(self, scope: GitConfigScope, key: str, value: str) -> None:
        """Add a value to a key."""
        self.execute(scope, "--add", key, value)

    def replace_all(self, scope: GitConfigScope, key: str, value: str) -> None:
        """Replace all values of a key with one value."""
        self.execute(scope, "--replace-all", key, value)

    def unset_all(self, scope: GitConfigScope, key: str) -> None:
        """Remove all values of a key."""
        self.execute(scope, "--unset-all", key)