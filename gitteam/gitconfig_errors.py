"""Errors reported by git config, classified by its exit status."""

from __future__ import annotations


class GitConfigError(Exception):
    """Base class of all git config failures."""

    default_message = "gitconfig error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class SectionOrKeyIsInvalidError(GitConfigError):
    default_message = "section or key is invalid"


class NoSectionOrNameProvidedError(GitConfigError):
    default_message = "no section or name provided"


class ConfigFileIsInvalidError(GitConfigError):
    default_message = "config file is invalid"


class ConfigFileCannotBeWrittenError(GitConfigError):
    default_message = "config file cannot be written"


class TryingToUnsetAnOptionWhichDoesNotExistError(GitConfigError):
    default_message = "trying to unset an option which does not exist"


class TryingToUseAnInvalidRegexpError(GitConfigError):
    default_message = "trying to use an invalid regexp"


class UnknownGitConfigError(GitConfigError):
    default_message = "unknown gitconfig error"


_BY_MESSAGE: dict[str, type[GitConfigError]] = {
    "exit status 1": SectionOrKeyIsInvalidError,
    "exit status 2": NoSectionOrNameProvidedError,
    "exit status 3": ConfigFileIsInvalidError,
    "exit status 4": ConfigFileCannotBeWrittenError,
    "exit status 5": TryingToUnsetAnOptionWhichDoesNotExistError,
    "exit status 6": TryingToUseAnInvalidRegexpError,
}


def classify(message: str | None) -> GitConfigError | None:
    """Turn a failure message of git config into the matching error, or None."""
    if message is None:
        return None
    error_class = _BY_MESSAGE.get(message)
    if error_class is None:
        return UnknownGitConfigError(f"unknown gitconfig error: {message}")
    return error_class()