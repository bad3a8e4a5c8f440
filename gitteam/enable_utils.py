"""Helpers for enabling co-authoring: commit templates and argument sorting."""

from __future__ import annotations


def prepare_for_commit_message(coauthors: list[str]) -> str:
    """Render sorted "Co-authored-by:" trailers for a commit template."""
    if not coauthors:
        return ""
    lines = "".join(f"Co-authored-by: {coauthor}\n" for coauthor in sorted(coauthors))
    return ("\n\n" + lines).rstrip("\n")


def partition(user_provided_data: list[str]) -> tuple[list[str], list[str]]:
    """Split arguments into co-author candidates (containing a space) and aliases."""
    coauthor_candidates: list[str] = []
    alias_candidates: list[str] = []
    for datum in user_provided_data:
        (coauthor_candidates if " " in datum else alias_candidates).append(datum)
    return coauthor_candidates, alias_candidates