"""Manage co-authors for git commits: commit templates, hooks and state in git config."""

__version__ = "1.7.0"