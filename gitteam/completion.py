"""Shell completion of co-author aliases."""

from __future__ import annotations

from .gitconfig import GitConfigReader
from .gitconfig_errors import GitConfigError
from .scopes import GitConfigScope

_ALIAS_PREFIX = "team.alias."


class AliasShellCompletion:
    """Suggest the aliases that have not been selected yet."""

    def __init__(self, reader: GitConfigReader) -> None:
        self._reader = reader

    def complete(self, selected_aliases: list[str]) -> list[str]:
        """Return the known aliases not in selected_aliases, sorted."""
        try:
            assignments = self._reader.get_regexp(GitConfigScope.GLOBAL, "team.alias")
        except GitConfigError:
            return []

        selected = set(selected_aliases)
        remaining = (
            raw_alias.removeprefix(_ALIAS_PREFIX) for raw_alias in assignments
        )
        return sorted(alias for alias in remaining if alias not in selected)