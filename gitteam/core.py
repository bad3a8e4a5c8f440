"""Core types and validation of co-authors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Assignment:
    """A co-author linked to an alias."""

    alias: str
    coauthor: str


class Policy(Protocol):
    """The behaviour applied when a command is issued; returns an event."""

    def apply(self) -> Any: ...


class InvalidCoauthorError(ValueError):
    """A co-author candidate does not look like "Name <email>"."""

    def __init__(self, candidate: str) -> None:
        self.candidate = candidate
        super().__init__(f"not a valid coauthor: {candidate}")


def sanity_check_coauthor(candidate: str) -> None:
    """Raise InvalidCoauthorError unless the candidate looks like a co-author."""
    has_arrow_brackets = " <" in candidate and candidate.endswith(">")
    if not (has_arrow_brackets and "@" in candidate):
        raise InvalidCoauthorError(candidate)


def sanity_check_coauthors(coauthors: list[str]) -> list[InvalidCoauthorError]:
    """Check every candidate and return the errors found, in order."""
    errors: list[InvalidCoauthorError] = []
    for coauthor in coauthors:
        try:
            sanity_check_coauthor(coauthor)
        except InvalidCoauthorError as exc:
            errors.append(exc)
    return errors