"""Running policies as commands, and resolving aliases to co-authors."""

from __future__ import annotations

from typing import Any, Callable

from .effects import Effect
from .gitconfig import GitConfig
from .gitconfig_errors import GitConfigError
from .scopes import GitConfigScope
from .core import Policy


class AliasResolutionError(LookupError):
    """An alias has no co-author assigned."""

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(f"failed to resolve alias team.alias.{alias}")


def apply_policy(policy: Policy, event_mapper: Callable[[Any], Effect]) -> Effect:
    """Apply a policy and convert the resulting event to an effect."""
    return event_mapper(policy.apply())


def run(policy: Policy, event_mapper: Callable[[Any], Effect]) -> None:
    """Apply a policy, convert its event to an effect and run that effect."""
    apply_policy(policy, event_mapper).run()


def resolve_alias(alias: str, get: Callable[[GitConfigScope, str], str] | None = None) -> str:
    """Look up "team.alias.<alias>" in the global git configuration."""
    if get is None:
        get = GitConfig().get
    try:
        coauthor = get(GitConfigScope.GLOBAL, f"team.alias.{alias}")
    except GitConfigError as exc:
        raise AliasResolutionError(alias) from exc
    if not coauthor:
        raise AliasResolutionError(alias)
    return coauthor


def resolve_aliases(
    aliases: list[str], resolve: Callable[[str], str] | None = None
) -> tuple[list[str], list[AliasResolutionError]]:
    """Resolve every alias; return the co-authors found and the errors met."""
    if resolve is None:
        resolve = resolve_alias
    resolved: list[str] = []
    errors: list[AliasResolutionError] = []
    for alias in aliases:
        try:
            resolved.append(resolve(alias))
        except AliasResolutionError as exc:
            errors.append(exc)
    return resolved, errors